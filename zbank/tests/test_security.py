from zbank.security import hash_pin, verify_pin


def test_hash_pin_is_salted_and_not_plain():
    first = hash_pin("1234")
    second = hash_pin("1234")
    assert "1234" not in first.split("$")[2]
    assert first.startswith("scrypt$")
    assert first != second


def test_verify_pin():
    stored = hash_pin("1234")
    assert verify_pin("1234", stored)
    assert not verify_pin("12345", stored)
    assert not verify_pin("", stored)


def test_verify_pin_rejects_plain_or_malformed_hashes():
    assert not verify_pin("1234", "1234")
    assert not verify_pin("1234", "md5$abc$def")
    assert not verify_pin("1234", "")
