"""Employees and the team mates they work with."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

_NAME_SIZE = 30


@dataclass
class Employee:
    """An employee with a short name, an age and a list of team mates."""

    name: str
    age: int
    team_mates: list[Employee] = field(default_factory=list, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.name.encode()) >= _NAME_SIZE:
            raise ValueError(f"name must be shorter than {_NAME_SIZE} bytes: {self.name!r}")

    def add_team_mate(self, mate: Employee) -> None:
        self.team_mates.append(mate)

    def describe(self) -> str:
        """A multi-line description listing the team mates."""
        lines = [
            f"Name: {self.name}\n",
            f"Age:  {self.age}\n",
            f"Number of TeamMates: {len(self.team_mates)}\n",
        ]
        if self.team_mates:
            lines.append("\t")
        lines.extend(f"{mate.name}, " for mate in self.team_mates)
        lines.append("\n")
        return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Describe an employee before and after adding team mates."""
    joe = Employee("Joe", 29)
    tom = Employee("Tom", 32)
    bill = Employee("Bill", 35)

    sys.stdout.write(joe.describe())
    joe.add_team_mate(tom)
    joe.add_team_mate(bill)
    sys.stdout.write(joe.describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())