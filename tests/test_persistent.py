import pytest

from practicekit.persistent import PersistentList


def test_basic():
    lst = PersistentList()
    with pytest.raises(IndexError):
        lst.peek()

    lst = lst.prepend(1).prepend(2).prepend(3)
    assert lst.peek() == 3

    lst = lst.tail()
    assert lst.peek() == 2

    lst = lst.tail()
    assert lst.peek() == 1

    lst = lst.tail()
    with pytest.raises(IndexError):
        lst.peek()

    lst = lst.tail()
    with pytest.raises(IndexError):
        lst.peek()


def test_iter():
    lst = PersistentList().prepend(2).prepend(3)
    lst2 = lst.prepend(1)

    iterator = iter(lst)
    assert next(iterator) == 3
    assert next(iterator) == 2
    assert lst.peek() == 3

    iterator2 = iter(lst2)
    assert next(iterator2) == 1
    assert next(iterator2) == 3
    assert next(iterator2) == 2
    assert lst2.peek() == 1


def test_prepend_leaves_original_unchanged():
    base = PersistentList([4, 5, 6])
    extended = base.prepend(7)
    assert list(base) == [4, 5, 6]
    assert list(extended) == [7, 4, 5, 6]
    assert list(extended.tail()) == list(base)


def test_bool_and_constructor_order():
    assert not PersistentList()
    lst = PersistentList([9, 8, 7])
    assert lst
    assert lst.peek() == 9
    assert list(lst) == [9, 8, 7]