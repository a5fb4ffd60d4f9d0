import math
import random
import re
from dataclasses import dataclass
from typing import Any

from cipherlab.core.exceptions import InvalidKeyError, NonInvertibleKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import ALPHABET_SIZE, index_of, letter_at, letters_only
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry

Matrix = list[list[int]]

# Cofactor expansion grows factorially, so larger keys are refused.
MAX_KEY_SIZE = 5


@dataclass(frozen=True)
class HillKeyMatrix:
    """Square Hill key matrix. Entries are reduced mod 26 when used."""

    rows: tuple[tuple[int, ...], ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    def as_lists(self) -> Matrix:
        return [list(row) for row in self.rows]


def parse_key_matrix(key: Any) -> HillKeyMatrix:
    """
    Parse a Hill key into a square matrix.

    Accepts a string of integers separated by whitespace and/or commas, a flat
    list of integers, or a nested list. The number of entries must be a
    non-zero perfect square no larger than MAX_KEY_SIZE squared; the matrix
    is filled row by row.

    Raises:
        InvalidKeyError: If the key is empty, has non-integer entries, or its
            entry count is not a perfect square, or the matrix is too large
    """
    if isinstance(key, HillKeyMatrix):
        return key

    if isinstance(key, str):
        tokens = [token for token in re.split(r"[\s,]+", key.strip()) if token]
        if not all(re.fullmatch(r"[+-]?\d+", token) for token in tokens):
            raise InvalidKeyError("Hill key must contain only integers", key)
        values = [int(token) for token in tokens]
    elif isinstance(key, (list, tuple)):
        if key and all(isinstance(row, (list, tuple)) for row in key):
            if len({len(row) for row in key}) != 1 or len(key[0]) != len(key):
                raise InvalidKeyError("Hill key matrix must be square", key)
            values = [value for row in key for value in row]
        else:
            values = list(key)
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            raise InvalidKeyError("Hill key must contain only integers", key)
    else:
        raise InvalidKeyError("Hill key must be a string or a list of integers", key)

    n = math.isqrt(len(values))
    if not values or n * n != len(values):
        raise InvalidKeyError(
            f"Hill key needs a perfect-square number of entries, got {len(values)}",
            key,
        )
    if n > MAX_KEY_SIZE:
        raise InvalidKeyError(
            f"Hill key matrix is {n}x{n}; at most {MAX_KEY_SIZE}x{MAX_KEY_SIZE} is supported",
            key,
        )

    return HillKeyMatrix(tuple(tuple(values[r * n:(r + 1) * n]) for r in range(n)))


def mod_inverse(a: int, m: int = ALPHABET_SIZE) -> int | None:
    """Find x in [1, m) with a*x = 1 (mod m) by exhaustive search, or None."""
    a %= m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def _minor(m: Matrix, row: int, col: int) -> Matrix:
    return [r[:col] + r[col + 1:] for i, r in enumerate(m) if i != row]


def determinant(m: Matrix) -> int:
    """Integer determinant by cofactor expansion along the first row."""
    n = len(m)
    if n == 1:
        return m[0][0]
    if n == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]
    return sum(
        (-1) ** col * m[0][col] * determinant(_minor(m, 0, col))
        for col in range(n)
    )


def adjugate(m: Matrix) -> Matrix:
    """Transpose of the cofactor matrix."""
    n = len(m)
    if n == 1:
        return [[1]]
    return [
        [(-1) ** (row + col) * determinant(_minor(m, col, row)) for col in range(n)]
        for row in range(n)
    ]


def matrix_inverse_mod26(matrix: Matrix) -> Matrix:
    """
    Invert a square matrix modulo 26.

    For a 2x2 matrix [[a, b], [c, d]] this is detInv * [[d, -b], [-c, a]].

    Raises:
        NonInvertibleKeyError: If the determinant shares a factor with 26
    """
    det = determinant(matrix) % ALPHABET_SIZE
    det_inv = mod_inverse(det)

    if det_inv is None:
        raise NonInvertibleKeyError(det)

    return [
        [(value * det_inv) % ALPHABET_SIZE for value in row]
        for row in adjugate(matrix)
    ]


def _apply(matrix: Matrix, block: list[int]) -> list[int]:
    n = len(matrix)
    return [sum(matrix[i][k] * block[k] for k in range(n)) % ALPHABET_SIZE for i in range(n)]


def hill(text: str, key: Any, encrypt: bool = True) -> str:
    """
    Encrypt or decrypt text with the Hill cipher.

    Text is reduced to uppercase Latin letters and cut into blocks of the
    matrix size. A trailing block shorter than that is copied through
    unchanged rather than padded, so it is not enciphered.

    Raises:
        InvalidKeyError: If the key cannot be parsed into a square matrix
        NonInvertibleKeyError: If decrypting with a matrix that has no inverse mod 26
    """
    matrix = parse_key_matrix(key).as_lists()
    if not encrypt:
        matrix = matrix_inverse_mod26(matrix)

    n = len(matrix)
    clean = letters_only(text)

    result = []
    for i in range(0, len(clean), n):
        chunk = clean[i:i + n]
        if len(chunk) < n:
            result.append(chunk)
            break

        vector = _apply(matrix, [index_of(c) for c in chunk])
        result.append("".join(letter_at(v) for v in vector))

    return "".join(result)


@EngineRegistry.register
class HillEngine(CipherEngine):
    """
    Hill cipher engine.

    The Hill cipher uses matrix multiplication for encryption.
    Plaintext is divided into vectors of length n, and each vector
    is multiplied by an n x n key matrix modulo 26.

    For a 2x2 matrix:
    [a b]   [p1]   [a*p1 + b*p2]
    [c d] x [p2] = [c*p1 + d*p2] (mod 26)

    The key matrix must be invertible modulo 26 to decrypt.
    """

    name = "Hill Cipher"
    cipher_type = CipherType.HILL
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A polygraphic cipher using linear algebra. "
        "Blocks of letters are encrypted by multiplying with a key matrix. "
        "The key matrix must be invertible modulo 26."
    )
    key_hint = "Four integers for a 2x2 matrix, row by row, e.g. '3 3 2 5'."

    def parse_key(self, key: Any) -> HillKeyMatrix:
        return parse_key_matrix(key)

    def transform(self, text: str, key: HillKeyMatrix, encrypt: bool) -> str:
        return hill(text, key, encrypt)

    def format_key(self, key: HillKeyMatrix) -> str:
        return " ".join(str(value) for row in key.rows for value in row)

    def validate_key(self, key: Any, encrypt: bool = True) -> bool:
        """Any square matrix encrypts; only invertible ones decrypt."""
        try:
            matrix = self.parse_key(key)
            if not encrypt:
                matrix_inverse_mod26(matrix.as_lists())
        except (InvalidKeyError, NonInvertibleKeyError):
            return False
        return True

    def generate_random_key(self) -> str:
        """Generate a random invertible 2x2 key matrix."""
        while True:
            values = [random.randint(0, 25) for _ in range(4)]
            if self.validate_key(values, encrypt=False):
                return " ".join(str(v) for v in values)

    def normalize_suggested_key(self, raw: str) -> str:
        """Keep only the integers of a suggestion, space separated."""
        numbers = re.findall(r"-?\d+", raw)
        if not numbers:
            raise InvalidKeyError("Suggested Hill key contains no numbers", raw)
        return " ".join(numbers)

    def explain(self, text: str, result: str, key: HillKeyMatrix, encrypt: bool) -> str:
        """Generate human-readable explanation."""
        matrix = key.as_lists()
        n = key.size
        if not encrypt:
            matrix = matrix_inverse_mod26(matrix)

        matrix_str = "\n".join(
            "[" + " ".join(f"{x:2d}" for x in row) + "]"
            for row in matrix
        )
        label = "key matrix" if encrypt else "inverse key matrix"
        leftover = len(letters_only(text)) % n

        explanation = (
            f"Hill cipher with {n}x{n} {label}:\n{matrix_str}\n"
            f"Each group of {n} letters is multiplied by this matrix modulo 26."
        )
        if leftover:
            explanation += (
                f" The last {leftover} letter(s) did not fill a block and were "
                f"copied unchanged."
            )
        return explanation
