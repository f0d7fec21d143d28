from rustlings.solutions.counters import byte_counter, char_counter, num_sq


def test_different_counts():
    s = "Café au lait"
    assert char_counter(s) == 12
    assert byte_counter(s) == 13


def test_same_counts():
    s = "Cafe au lait"
    assert char_counter(s) == byte_counter(s) == 12


def test_different_counts_using_copy():
    s = "".join(["Café", " au lait"])
    assert char_counter(s) < byte_counter(s)


def test_mut_box():
    assert num_sq(3) == 9