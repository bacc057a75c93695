from dataclasses import dataclass


@dataclass
class UserContextDto:
    sub: str
    primary_email: str = ""

    @property
    def owner_id(self) -> str:
        return self.sub
