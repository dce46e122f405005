import pytest

from sysdemos.employee import Employee, main


def test_describe_without_mates():
    joe = Employee("Joe", 29)
    assert joe.describe() == "Name: Joe\nAge:  29\nNumber of TeamMates: 0\n\n"


def test_describe_with_mates():
    joe = Employee("Joe", 29)
    joe.add_team_mate(Employee("Tom", 32))
    joe.add_team_mate(Employee("Bill", 35))
    assert joe.describe() == (
        "Name: Joe\nAge:  29\nNumber of TeamMates: 2\n\tTom, Bill, \n"
    )


def test_team_mates_keep_order():
    joe = Employee("Joe", 29)
    mates = [Employee(name, 30) for name in ("Ann", "Bo", "Cy")]
    for mate in mates:
        joe.add_team_mate(mate)
    assert joe.team_mates == mates
    assert joe.team_mates[0] is mates[0]


def test_mates_do_not_affect_equality():
    a = Employee("Joe", 29)
    b = Employee("Joe", 29)
    a.add_team_mate(b)
    b.add_team_mate(a)
    assert a == b


def test_name_too_long():
    with pytest.raises(ValueError):
        Employee("x" * 30, 40)


def test_longest_name_allowed():
    assert Employee("y" * 29, 40).name == "y" * 29


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Name: Joe\n") == 2
    assert out.endswith("\tTom, Bill, \n")