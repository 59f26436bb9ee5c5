from typing import Dict


class MenuItem:
    """One countable entry on a menu.

    ``count`` is the tally across all owners and always equals the sum of
    ``owner_count``. Owners whose contribution drops to zero are removed
    from ``owner_count`` rather than kept at 0.
    """

    __slots__ = ('name', 'count', 'owner_count')

    def __init__(self, name: str):
        self.name = name
        self.count = 0
        self.owner_count: Dict[str, int] = {}

    def increment(self, owner: str) -> None:
        self.count += 1
        self.owner_count[owner] = self.owner_count.get(owner, 0) + 1

    def decrement(self, owner: str) -> bool:
        """Take one back from ``owner``; returns False when nothing changed.

        Floors at zero: an item with no count, or an owner with no
        contribution, is left as is.
        """
        held = self.owner_count.get(owner, 0)
        if self.count <= 0 or held <= 0:
            return False
        self.count -= 1
        if held == 1:
            del self.owner_count[owner]
        else:
            self.owner_count[owner] = held - 1
        return True

    def to_dict(self):
        return {
            'name': self.name,
            'owner_count': dict(self.owner_count),
            'count': self.count,
        }

    def __repr__(self):
        return f"MenuItem(name={self.name!r}, count={self.count}, owner_count={self.owner_count!r})"
