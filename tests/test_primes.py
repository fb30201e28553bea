from xvtools.primes import main, primes_sieve


def test_primes_below_36():
    assert list(primes_sieve(range(2, 36))) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


def test_empty_input():
    assert list(primes_sieve([])) == []


def test_heads_do_not_divide_later_heads():
    heads = list(primes_sieve(range(2, 200)))
    assert heads[:5] == [2, 3, 5, 7, 11]
    divisible = [
        (a, b)
        for i, a in enumerate(heads)
        for b in heads[i + 1:]
        if b % a == 0
    ]
    assert divisible == []


def test_every_input_is_divisible_by_some_head():
    heads = list(primes_sieve(range(2, 100)))
    for n in range(2, 100):
        assert any(n % h == 0 for h in heads)


def test_composite_head_is_kept():
    assert list(primes_sieve([4, 6, 8, 9])) == [4, 6, 9]


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines(keepends=True)
    assert lines[0] == "res1 == 4 \n"
    assert lines[1] == "primes 2 \n"
    assert lines[-2:] == ["res1 == 0 \n", "Done \n"]
    assert len(lines) == 2 * len(list(primes_sieve(range(2, 36)))) + 2