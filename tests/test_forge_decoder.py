import pytest

from modmeta.decoders.forge import FORGE_HOMEPAGE, ForgeVersionDecoder, parse_properties

FORGE_PROPERTIES = b"""#Fri Jun 27 21:27:04 CEST 2014
forge.major.number=10
forge.minor.number=13
forge.revision.number=0
forge.build.number=1180
"""


def _assert_forge_identity(details):
    assert details.mod_id == "Forge"
    assert details.name == "Minecraft Forge"
    assert details.homepage == FORGE_HOMEPAGE


def test_reads_version_numbers():
    details = ForgeVersionDecoder().decode(FORGE_PROPERTIES)

    _assert_forge_identity(details)
    assert details.version == "10.13.0.1180"


def test_missing_numbers_default_to_zero():
    details = ForgeVersionDecoder().decode(b"forge.major.number=9\nforge.build.number=42\n")
    assert details.version == "9.0.0.42"


@pytest.mark.parametrize("payload", [
    b"",
    b"this is not a properties file",
    b"\xff\xfe\x00garbage",
    b"# only a comment\n\n",
])
def test_malformed_properties_keep_fixed_identity(payload):
    details = ForgeVersionDecoder().decode(payload)

    _assert_forge_identity(details)
    assert details.version == "0.0.0.0"


def test_keys_are_case_sensitive():
    properties = parse_properties(b"Forge.Major.Number=1\nforge.minor.number=2\n")
    assert "Forge.Major.Number" in properties
    assert ForgeVersionDecoder().decode(b"Forge.Major.Number=1\n").version == "0.0.0.0"


def test_bang_comments_are_ignored():
    details = ForgeVersionDecoder().decode(b"! comment\nforge.major.number=7\n")
    assert details.version == "7.0.0.0"


def test_indented_lines_are_separate_entries():
    details = ForgeVersionDecoder().decode(b"forge.major.number=10\n  forge.minor.number=13\n")
    assert details.version == "10.13.0.0"


def test_stray_lines_do_not_discard_valid_numbers():
    payload = FORGE_PROPERTIES + b"garbage line\n[section]\n"
    assert ForgeVersionDecoder().decode(payload).version == "10.13.0.1180"


def test_trailing_comments_are_stripped():
    payload = b"forge.major.number=10 # major\nforge.minor.number = 13\n"
    assert ForgeVersionDecoder().decode(payload).version == "10.13.0.0"


def test_escaped_hash_is_kept():
    assert parse_properties(b"forge.build.number=12\\#3\n")["forge.build.number"] == "12#3"


def test_colon_separator_and_crlf():
    payload = b"forge.major.number: 14\r\nforge.build.number=2847\r\n"
    assert ForgeVersionDecoder().decode(payload).version == "14.0.0.2847"
