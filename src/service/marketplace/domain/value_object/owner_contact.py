import attrs


@attrs.frozen
class OwnerContact:
    """Where to notify an offer owner."""

    user_id: int
    name: str
    email: str

    @property
    def is_reachable(self) -> bool:
        return bool(self.email and '@' in self.email)
