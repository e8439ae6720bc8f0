"""Tasks ordered by priority and date."""

from dataclasses import dataclass, field

from dsbasics.date import Date


@dataclass(eq=False)
class Task:
    """A task identified by its code; lower priority values come first."""

    code: str = ""
    priority: int = -1
    date: Date = field(default_factory=Date)

    def __lt__(self, other):
        """Order by priority, then by date for equal priorities."""
        if not isinstance(other, Task):
            return NotImplemented
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.date < other.date

    def __eq__(self, other):
        """Tasks are the same task when their codes match."""
        if not isinstance(other, Task):
            return NotImplemented
        return self.code == other.code

    def __hash__(self):
        return hash(self.code)