import re

from fairdice.config import config
from fairdice.errors import ConfigurationError, InvalidDiceSpec

_FACE_RE = re.compile(r"[+-]?[0-9]+")


class Die:
    """
    An immutable list of face values. Faces may repeat and their order matters,
    since throws pick a face by index.

    Dice compare by identity: two dice with the same faces are still two dice.
    """
    __slots__ = ("_faces",)

    def __init__(self, faces):
        faces = tuple(faces)
        if not faces:
            raise InvalidDiceSpec("A die must have at least one face.")
        self._faces = faces

    @classmethod
    def parse(cls, spec: str) -> "Die":
        if not spec.strip():
            raise InvalidDiceSpec("The face list is empty.")
        tokens = [token.strip() for token in spec.split(',')]
        if not all(_FACE_RE.fullmatch(token) for token in tokens):
            raise InvalidDiceSpec(f"All dice faces must be integer values, got '{spec}'.")
        return cls(int(token) for token in tokens)

    @property
    def faces(self) -> tuple[int, ...]:
        return self._faces

    def get_face(self, index: int) -> int:
        return self._faces[index % len(self._faces)]

    def sides(self) -> int:
        return len(self._faces)

    def __len__(self) -> int:
        return len(self._faces)

    def __str__(self) -> str:
        return ",".join(map(str, self._faces))

    def __repr__(self) -> str:
        return f"Die([{self}])"


class DiceParser:
    @staticmethod
    def parse(args: list[str], min_dice: int | None = None) -> list[Die]:
        if min_dice is None:
            min_dice = config.MIN_DICE
        if len(args) < min_dice:
            raise ConfigurationError.not_enough_dice(min_dice)
        dice = []
        for position, arg in enumerate(args, start=1):
            try:
                dice.append(Die.parse(arg))
            except InvalidDiceSpec as e:
                raise ConfigurationError.invalid_die(position, arg, str(e)) from e
        return dice
