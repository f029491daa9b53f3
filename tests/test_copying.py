import pytest

from minishparse.copying import bounded_concat, bounded_copy, copy_prefix


@pytest.mark.parametrize("count", [0, 1, 3, 5, 10])
def test_copy_prefix_is_a_prefix(count):
    source = "hello"
    result = copy_prefix(source, count)
    assert source.startswith(result)
    assert len(result) == min(count, len(source))


def test_copy_prefix_rejects_negative_count():
    with pytest.raises(ValueError):
        copy_prefix("abc", -1)


def test_copy_prefix_rejects_non_integer():
    with pytest.raises(TypeError):
        copy_prefix("abc", 1.5)


def test_bounded_copy_with_ample_room():
    assert bounded_copy("BBBB", 0xF00) == ("BBBB", 4)


def test_bounded_copy_zero_size_copies_nothing():
    assert bounded_copy("BBBB", 0) == ("", 4)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_bounded_copy_truncates_to_room(size):
    copied, length = bounded_copy("BBBB", size)
    assert length == 4
    assert len(copied) == min(size - 1, 4)
    assert "BBBB".startswith(copied)


def test_bounded_copy_rejects_negative_size():
    with pytest.raises(ValueError):
        bounded_copy("abc", -2)


def test_bounded_concat_full_room():
    destination = "hello"
    source = " world!"
    size = len(destination) + len(source) + 1
    assert bounded_concat(destination, source, size) == (destination + source, 12)


def test_bounded_concat_truncates():
    result, total = bounded_concat("hello", " world!", 8)
    assert len(result) == 7
    assert ("hello" + " world!").startswith(result)
    assert total == len("hello") + len(" world!")


def test_bounded_concat_zero_size():
    assert bounded_concat("hello", " world!", 0) == ("hello", len(" world!"))


@pytest.mark.parametrize("size", [1, 3, 5])
def test_bounded_concat_no_room_past_destination(size):
    assert bounded_concat("hello", " world!", size) == ("hello", len(" world!") + size)


def test_bounded_concat_rejects_negative_size():
    with pytest.raises(ValueError):
        bounded_concat("a", "b", -1)