import pytest

from name_parser import ParsedName, ParseOptions, parse_name


@pytest.mark.parametrize("value", [None, "", "   ", 42, "'Bill'"])
def test_unusable_input_has_zero_confidence(value):
    assert parse_name(value) == ParsedName(confidence=0.0)
    assert parse_name(value).as_dict() == {"confidence": 0.0}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("John Smith", {"first_name": "John", "last_name": "Smith"}),
        ("  John    Smith  ", {"first_name": "John", "last_name": "Smith"}),
        ("John David Smith", {"first_name": "John", "middle_name": "David", "last_name": "Smith"}),
        (
            "John Paul George Ringo Starr",
            {"first_name": "John", "middle_name": "Paul George Ringo", "last_name": "Starr"},
        ),
        ("Mr John Smith", {"prefix": "Mr", "first_name": "John", "last_name": "Smith"}),
        ("Professor Albert Einstein", {"prefix": "Professor", "first_name": "Albert", "last_name": "Einstein"}),
        ("Jane Doe PhD", {"first_name": "Jane", "last_name": "Doe", "suffix": "PhD"}),
        ("William Gates III", {"first_name": "William", "last_name": "Gates", "suffix": "III"}),
        (
            "Dr. Martin Luther King Jr",
            {"prefix": "Dr.", "first_name": "Martin", "middle_name": "Luther", "last_name": "King", "suffix": "Jr"},
        ),
        ("Ludwig van Beethoven", {"first_name": "Ludwig", "last_name": "van Beethoven"}),
        ("Leonardo da Vinci", {"first_name": "Leonardo", "last_name": "da Vinci"}),
        (
            "Vincent Willem van Gogh",
            {"first_name": "Vincent", "middle_name": "Willem", "last_name": "van Gogh"},
        ),
        (
            "Prof. Johann von Neumann PhD",
            {"prefix": "Prof.", "first_name": "Johann", "last_name": "von Neumann", "suffix": "PhD"},
        ),
        ("William 'Bill' Gates", {"first_name": "William", "last_name": "Gates"}),
        ('Robert "Bob" Smith', {"first_name": "Robert", "last_name": "Smith"}),
        ("John (Johnny) Doe", {"first_name": "John", "last_name": "Doe"}),
        ("A.B. Cooper", {"first_name": "A.B.", "last_name": "Cooper"}),
        ("John F. Kennedy", {"first_name": "John", "middle_name": "F.", "last_name": "Kennedy"}),
        ("T. S. Eliot", {"first_name": "T. S.", "last_name": "Eliot"}),
        ("Smith, John", {"first_name": "John", "last_name": "Smith"}),
    ],
)
def test_full_confidence_parses(raw, expected):
    assert parse_name(raw).as_dict() == {**expected, "confidence": 1.0}


def test_single_name_is_first_name():
    assert parse_name("Madonna").as_dict() == {"first_name": "Madonna", "confidence": 0.5}


def test_prefix_only():
    assert parse_name("Dr.").as_dict() == {"prefix": "Dr.", "confidence": 0.1}


def test_long_names_lose_confidence():
    result = parse_name("John Paul George Ringo Pete Starr")
    assert result.middle_name == "Paul George Ringo Pete"
    assert result.confidence == 0.9


def test_nicknames_do_not_count_as_tokens():
    assert parse_name("Prince (The Artist)").as_dict() == {"first_name": "Prince", "confidence": 0.5}


@pytest.mark.parametrize("transform", [str.upper, str.lower])
def test_casing_changes_only_field_contents(transform):
    raw = "Dr. Vincent Willem van Gogh Jr"
    original = parse_name(raw).as_dict()
    changed = parse_name(transform(raw)).as_dict()
    assert changed.keys() == original.keys()
    assert changed["confidence"] == original["confidence"]
    for key in ("prefix", "first_name", "middle_name", "last_name", "suffix"):
        assert changed[key] == transform(original[key])


def test_comma_format_with_prefix_middle_and_suffixes():
    result = parse_name("King Jr., Dr. Martin Luther PhD")
    assert result.as_dict() == {
        "prefix": "Dr.",
        "first_name": "Martin",
        "middle_name": "Luther",
        "last_name": "King",
        "suffix": "Jr. PhD",
        "confidence": 0.9,
    }


def test_comma_format_groups_initials_but_not_particles():
    result = parse_name("van Gogh, V. W.")
    assert result.as_dict() == {"first_name": "V. W.", "last_name": "van Gogh", "confidence": 1.0}


def test_comma_format_does_not_strip_nicknames():
    result = parse_name("Smith, John 'Jack'")
    assert result.first_name == "John"
    assert result.middle_name == "'Jack'"


def test_comma_format_single_side_gets_comma_bonus():
    assert parse_name("Smith, Dr.").as_dict() == {"prefix": "Dr.", "last_name": "Smith", "confidence": 0.85}


def test_comma_format_suffix_only_last_part_omits_last_name():
    result = parse_name("Jr, John")
    assert result.last_name is None
    assert result.suffix == "Jr"
    assert result.first_name == "John"


def test_several_commas_give_empty_record():
    assert parse_name("Smith, John, Jr").as_dict() == {"confidence": 0.1}


def test_edge_commas_use_space_format():
    assert parse_name(",John Smith").as_dict() == {"first_name": ",John", "last_name": "Smith", "confidence": 1.0}
    assert parse_name("John Smith,").as_dict() == {"first_name": "John", "last_name": "Smith,", "confidence": 1.0}


def test_options_replace_default_sets():
    options = ParseOptions(prefixes={"chief"}, suffixes={"cissp"}, particles={"zu"})
    result = parse_name("Chief Karl zu Guttenberg CISSP", options)
    assert result.as_dict() == {
        "prefix": "Chief",
        "first_name": "Karl",
        "last_name": "zu Guttenberg",
        "suffix": "CISSP",
        "confidence": 1.0,
    }
    assert parse_name("Mr John Smith", options).first_name == "Mr"


def test_fold_accents_option():
    assert parse_name("Señor Juan Diaz", ParseOptions(prefixes={"senor"})).prefix is None
    assert parse_name("Señor Juan Diaz", ParseOptions(prefixes={"senor"}, fold_accents=True)).prefix == "Señor"


def test_fix_text_option():
    assert parse_name("JosÃ© Smith", ParseOptions(fix_text=True)).first_name == "José"
    assert parse_name("JosÃ© Smith").first_name == "JosÃ©"


@pytest.mark.parametrize(
    "raw",
    ["x", "a b c d e f g h", "Mr", "Jr", ", ,", "Smith,,John", "(((", "'\"()'", "Dr. Jr.", "de la", "Mr Smith, Jr"],
)
def test_confidence_always_in_range(raw):
    assert 0.0 <= parse_name(raw).confidence <= 1.0


def test_parsed_name_validates_fields():
    with pytest.raises(ValueError):
        ParsedName(confidence=1.5)
    with pytest.raises(ValueError):
        ParsedName(confidence=float("nan"))
    with pytest.raises(ValueError):
        ParsedName(confidence=0.5, first_name="")
