import pytest

from kata.numbers import create_palindrome, fib, is_palindrome, k_mirror, num_subseq


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_ten():
    assert fib(10) == 55


def test_create_palindrome_odd():
    assert create_palindrome(123, True) == int("123" + "21")


def test_create_palindrome_even():
    assert create_palindrome(123, False) == int("123" + "321")


@pytest.mark.parametrize("num", [1, 9, 10, 47, 305, 9999])
@pytest.mark.parametrize("odd", [True, False])
def test_create_palindrome_is_decimal_palindrome(num, odd):
    result = create_palindrome(num, odd)
    text = str(result)
    assert text == text[::-1]
    assert is_palindrome(result, 10)
    assert text.startswith(str(num))


def test_is_palindrome_binary():
    assert is_palindrome(int("101", 2), 2)
    assert is_palindrome(int("1001", 2), 2)
    assert not is_palindrome(int("100", 2), 2)


def test_is_palindrome_decimal_rejects_non_palindrome():
    assert not is_palindrome(12, 10)


def test_k_mirror_example():
    assert k_mirror(2, 5) == 25


def test_k_mirror_zero_count():
    assert k_mirror(3, 0) == 0


@pytest.mark.parametrize("k", [2, 3, 7])
def test_k_mirror_strictly_increasing(k):
    sums = [k_mirror(k, n) for n in range(1, 10)]
    assert all(a < b for a, b in zip(sums, sums[1:]))


@pytest.mark.parametrize("k", [2, 3, 5])
def test_k_mirror_first_terms_are_single_digits(k):
    assert k_mirror(k, 1) == 1
    assert k_mirror(k, k - 1) == sum(range(1, k))


def test_num_subseq_example():
    assert num_subseq([3, 5, 6, 7], 9) == 4


def test_num_subseq_does_not_mutate_input():
    nums = [7, 3, 6, 5]
    num_subseq(nums, 9)
    assert nums == [7, 3, 6, 5]


def test_num_subseq_every_subsequence_fits():
    nums = [1, 2, 3, 4, 5]
    assert num_subseq(nums, 100) == 2 ** len(nums) - 1


def test_num_subseq_nothing_fits():
    assert num_subseq([5, 6, 7], 9) == num_subseq([], 9)


def test_num_subseq_order_independent():
    assert num_subseq([2, 3, 3, 4, 6, 7], 12) == num_subseq([7, 6, 4, 3, 3, 2], 12)


def test_num_subseq_is_reduced_modulo():
    result = num_subseq([1] * 200, 2)
    assert result == (2**200 - 1) % (10**9 + 7)