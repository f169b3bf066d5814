"""
Static reference library.

Descriptive content keyed by cipher kind. Independent of the cipher
engine: nothing here is consulted at transform time.
"""

from dataclasses import dataclass

from app.models.schemas import CipherType


@dataclass(frozen=True)
class ReferenceEntry:
    """One article in the reference library."""

    title: str
    category: str
    description: str
    content: str
    cipher_type: CipherType | None = None


REFERENCE_ENTRIES: tuple[ReferenceEntry, ...] = (
    ReferenceEntry(
        title="Caesar Cipher",
        category="Classical Ciphers",
        description=(
            "A substitution cipher where each letter is shifted by a fixed "
            "number of positions in the alphabet."
        ),
        content="""\
The Caesar cipher is one of the earliest known encryption techniques, named after Julius Caesar who reportedly used it to communicate with his generals.

How it works:
- Each letter in the plaintext is shifted a certain number of places down the alphabet
- The shift amount is the 'key' (traditionally 3 for Caesar)
- When reaching the end of the alphabet, it wraps around to the beginning

Example with shift of 3:
A -> D, B -> E, C -> F, ..., X -> A, Y -> B, Z -> C

Security:
- Very weak by modern standards
- Only 25 possible keys (shifts 1-25)
- Easily broken by frequency analysis

Historical significance:
- Used by Roman military
- Foundation for more complex substitution ciphers
- Still used today for simple obfuscation (ROT13)""",
        cipher_type=CipherType.CAESAR,
    ),
    ReferenceEntry(
        title="Base64 Encoding",
        category="Modern Encoding",
        description=(
            "A binary-to-text encoding scheme that represents binary data in "
            "ASCII string format."
        ),
        content="""\
Base64 is not encryption but encoding - it's designed for data transmission and storage, not security.

How it works:
- Takes binary data and converts it to text
- Uses 64 characters: A-Z, a-z, 0-9, +, /
- Every 3 bytes of input become 4 characters of output
- Padding with '=' characters when needed

Common uses:
- Email attachments (MIME)
- Data URLs in web development
- API data transmission
- Configuration files

Important notes:
- NOT secure - easily reversible
- Increases data size by ~33%
- Safe for text transmission systems
- Case-sensitive""",
        cipher_type=CipherType.BASE64,
    ),
    ReferenceEntry(
        title="Morse Code",
        category="Communication Systems",
        description=(
            "A method of encoding text using dots and dashes to represent "
            "letters and numbers."
        ),
        content="""\
Invented by Samuel Morse in the 1830s for telegraph communication.

System:
- Dots (·) represent short signals
- Dashes (−) represent long signals
- Letters separated by spaces
- Words separated by larger spaces

Key features:
- Variable length encoding
- More common letters have shorter codes
- International standard (ITU)
- Still used in radio communications

Common patterns:
- E: ·     (most common letter, shortest code)
- T: −
- A: ·−
- SOS: ··· −−− ···

Modern usage:
- Amateur radio
- Aviation navigation
- Emergency signaling
- Educational purposes""",
        cipher_type=CipherType.MORSE,
    ),
    ReferenceEntry(
        title="Cryptography Fundamentals",
        category="General Knowledge",
        description="Basic concepts and terminology in cryptography and information security.",
        content="""\
Key Concepts:

Encryption vs Encoding:
- Encryption: Uses a key to transform data for security
- Encoding: Transforms data for compatibility/transmission

Cipher Types:
- Substitution: Replace characters with others
- Transposition: Rearrange character positions
- Stream: Encrypt one character at a time
- Block: Encrypt fixed-size groups

Security Principles:
- Confidentiality: Keep data secret
- Integrity: Ensure data hasn't changed
- Authentication: Verify identity
- Non-repudiation: Prevent denial

Historical Context:
- Ancient: Scytale, Caesar cipher
- Renaissance: Vigenère cipher
- Modern: DES, AES, RSA
- Quantum: Future-resistant algorithms

Remember: The ciphers in this app are for educational purposes and should not be used for actual security needs.""",
        cipher_type=None,
    ),
)


def get_entries(cipher_type: CipherType | None = None) -> list[ReferenceEntry]:
    """
    List reference entries.

    Args:
        cipher_type: Only return entries about this kind, if given

    Returns:
        Matching entries in library order
    """
    if cipher_type is None:
        return list(REFERENCE_ENTRIES)
    return [entry for entry in REFERENCE_ENTRIES if entry.cipher_type == cipher_type]
