from enum import Enum


class UserCategory(Enum):
    """Who is driving. Lower level is more urgent; informational only."""

    EMERGENCY = 1
    VIP = 2
    HANDICAPPED = 3
    REGULAR = 4

    @property
    def priority_level(self):
        return self.value

    @classmethod
    def from_choice(cls, choice):
        # Menu choices 1-4 line up with the priority levels
        for category in cls:
            if category.value == choice:
                return category
        return cls.REGULAR
