from decimal import Decimal

from rachaconta.money import Money


def test_create_money_from_numbers():
    assert Money.of(20) == Money(Decimal("20"))
    assert Money.of(139.94).value == Decimal("139.940")


def test_rounds_to_thousandths_half_away_from_zero():
    assert Money.of(10.5556) == Money.of("10.556")
    assert Money.of(10.5554) == Money.of("10.555")
    assert Money.of("10.5555") == Money.of("10.556")
    assert Money.of("-10.5555") == Money.of("-10.556")


def test_add_and_sub():
    assert Money.of(30) + 20 == Money.of(50)
    assert Money.of(30) + Money.of(19.9) == Money.of(49.9)
    assert Money.of(30) - Money.of(19.9) == Money.of(10.1)
    assert Money.of(10) - 15 == Money.of(-5)


def test_scalar_mul_and_div():
    assert Money.of(30) * 2 == Money.of(60)
    assert Money.of(30) * 1.5 == Money.of(45)
    assert Money.of(30) / 1.5 == Money.of(20)
    assert Money.of(10) / 3 == Money.of("3.333")


def test_sum():
    assert sum([Money.of(1), Money.of(2.5)]) == Money.of(3.5)
    assert Money.sum([Money.of(1), Money.of(2.5)]) == Money.of(3.5)
    assert Money.sum([]) == Money.zero()


def test_display_has_two_digits():
    assert str(Money.of(2.5)) == "2.50"
    assert str(Money.of("2.125")) == "2.13"
    assert f"{Money.of('2.125'):.2f}" == "2.13"
    assert f"{Money.of(7)}" == "7.00"


def test_round_and_compare():
    assert Money.of("1.005").round() == Money.of("1.01")
    assert Money.of(1) < Money.of("1.001")
    assert abs(Money.of(-3)) == Money.of(3)
    assert Money.zero().is_zero()
