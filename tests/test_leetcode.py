from practicekit.leetcode import max_profit, max_profit_windows, remove_duplicates


def test_max_profit():
    assert max_profit([7, 1, 6, 3, 4, 9]) == 11


def test_max_profit_windows():
    assert max_profit_windows([7, 1, 6, 3, 4, 9]) == 11


def test_max_profit_short_inputs():
    assert max_profit([]) == 0
    assert max_profit([5]) == 0
    assert max_profit_windows([]) == 0


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0


def test_profit_variants_agree():
    prices = [3, 8, 2, 2, 10, 1, 4]
    assert max_profit(prices) == max_profit_windows(prices)


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    count = remove_duplicates(nums)
    assert count == 5
    assert nums[0:count] == [0, 1, 2, 3, 4]


def test_remove_duplicates_keeps_length_and_tail():
    nums = [1, 1, 2]
    count = remove_duplicates(nums)
    assert count == 2
    assert nums == [1, 2, 2]


def test_remove_duplicates_all_distinct():
    nums = [1, 2, 3]
    assert remove_duplicates(nums) == 3
    assert nums == [1, 2, 3]