import pytest

from minishell import textops


SENTENCE = "Bonjour, un croissant s'il vous plait."


def test_strlen_matches_len():
    assert textops.strlen("hello world!") == len("hello world!")
    assert textops.strlen("") == 0


def test_strchr_finds_first_occurrence():
    text = "hello world!"
    index = textops.strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_missing_and_nul():
    assert textops.strchr("hello", "z") is None
    assert textops.strchr("hello", "\0") == len("hello")


def test_strrchr_finds_last_occurrence():
    text = "hello world!"
    index = textops.strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]
    assert textops.strrchr(text, "z") is None
    assert textops.strrchr(text, "\0") == len(text)


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        textops.strchr("hello", "lo")


def test_strncmp_source_example():
    assert textops.strncmp("Gest", "Hola", 6) == -1
    assert textops.strncmp("tola", "aeist", 6) == 1


@pytest.mark.parametrize(
    "first, second, count, expected",
    [
        ("abc", "abd", 2, 0),
        ("abc", "abd", 3, -1),
        ("abc", "ab", 3, 1),
        ("ab", "abc", 3, -1),
        ("same", "same", 10, 0),
        ("x", "y", 0, 0),
    ],
)
def test_strncmp_cases(first, second, count, expected):
    assert textops.strncmp(first, second, count) == expected


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        textops.strncmp("a", "b", -1)


def test_strnstr_respects_length():
    haystack = "Bonjour, comment tu t'appelles ordinateur?"
    assert textops.strnstr(haystack, "jour", 5) is None
    index = textops.strnstr(haystack, "jour", len(haystack))
    assert haystack[index:index + len("jour")] == "jour"


def test_strnstr_empty_needle():
    assert textops.strnstr("abc", "", 0) == 0
    assert textops.strnstr("abc", "z", 3) is None


def test_strdup_equal_copy():
    assert textops.strdup("hello") == "hello"


def test_substr_source_example():
    assert textops.substr("", 1, 1) == ""


def test_substr_bounds():
    text = "hello"
    assert textops.substr(text, 0, len(text)) == text
    assert textops.substr(text, 1, 100) == text[1:]
    assert textops.substr(text, len(text), 3) == ""
    with pytest.raises(ValueError):
        textops.substr(text, -1, 2)


def test_strjoin_source_example():
    assert textops.strjoin("Hi", "42") == "Hi42"


def test_strtrim_source_example():
    assert textops.strtrim("     Hola!        ", "   ") == "Hola!"


def test_strtrim_empty_charset_and_all_trimmed():
    assert textops.strtrim("  x  ", "") == "  x  "
    assert textops.strtrim("aaaa", "a") == ""
    assert textops.strtrim("xaby", "xy") == "ab"


def test_split_source_example_round_trip():
    words = textops.split(SENTENCE, " ")
    assert " ".join(words) == SENTENCE
    assert all(" " not in word and word for word in words)


def test_split_drops_empty_words():
    assert textops.split("  a  b ", " ") == ["a", "b"]
    assert textops.split("", " ") == []
    assert textops.split("    ", " ") == []


def test_strmapi_upper():
    assert textops.strmapi("Hola 42!", lambda i, c: c.upper()) == "HOLA 42!"


def test_strmapi_receives_indexes():
    seen = []
    textops.strmapi("abc", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striteri_mutates_in_place():
    buffer = list("abc")
    textops.striteri(buffer, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert "".join(buffer) == "AbC"


def test_strlcpy_full_copy():
    dst = bytearray(b"hello" + bytes(20))
    src = b"42!"
    assert textops.strlcpy(dst, src, len(dst)) == len(src)
    assert dst[:len(src)] == src
    assert dst[len(src)] == 0


def test_strlcpy_size_zero_leaves_dst():
    dst = bytearray(b"hello\0")
    assert textops.strlcpy(dst, b"42!", 0) == 3
    assert dst == bytearray(b"hello\0")


def test_strlcpy_truncates():
    dst = bytearray(10)
    assert textops.strlcpy(dst, b"42!", 2) == 3
    assert dst[0:1] == b"4"
    assert dst[1] == 0


def test_strlcpy_small_buffer():
    with pytest.raises(ValueError):
        textops.strlcpy(bytearray(2), b"hello", 10)


def test_strlcat_appends():
    head = b"hello, "
    src = b"42!"
    dst = bytearray(head + bytes(13))
    assert textops.strlcat(dst, src, 20) == len(head) + len(src)
    assert bytes(dst).split(b"\0")[0] == head + src


def test_strlcat_size_zero():
    dst = bytearray(b"hello, " + bytes(13))
    before = bytes(dst)
    assert textops.strlcat(dst, b"42!", 0) == len(b"42!")
    assert bytes(dst) == before


def test_strlcat_size_below_dst_length():
    dst = bytearray(b"hello, " + bytes(13))
    before = bytes(dst)
    assert textops.strlcat(dst, b"42!", 3) == 3 + len(b"42!")
    assert bytes(dst) == before


def test_strlcat_truncates():
    head = b"hello, "
    dst = bytearray(head + bytes(13))
    size = len(head) + 2
    assert textops.strlcat(dst, b"42!", size) == len(head) + 3
    result = bytes(dst).split(b"\0")[0]
    assert result == head + b"4"
    assert len(result) == size - 1


def test_strlcat_requires_nul():
    with pytest.raises(ValueError):
        textops.strlcat(bytearray(b"abc"), b"x", 10)