# src/trust_store/loader.py
# Trust store loader
# Reads a keystore file and returns the certificate authorities it trusts.
#
# Supported containers, detected from the file content (not the extension):
# - PKCS#12: what `keytool` writes by default since Java 9, so a
#   "mongo-truststore.jks" produced by a current JDK is really PKCS#12
# - PEM bundle: one or more "-----BEGIN CERTIFICATE-----" blocks
#
# Legacy proprietary JKS/JCEKS stores are recognised and rejected with the
# keytool command that converts them.

import os
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.serialization import pkcs12

from errors import TrustStoreFormatError, TrustStoreIOError, TrustStorePasswordError
from logger import get_logger

logger = get_logger(__name__)

PEM_CERTIFICATE_MARKER = b"-----BEGIN CERTIFICATE-----"
JKS_MAGIC = b"\xfe\xed\xfe\xed"
JCEKS_MAGIC = b"\xce\xce\xce\xce"

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class TrustMaterial:
    """
    Certificate authorities trusted for validating the server certificate.

    Immutable and never empty; loaded once per run.

    Attributes:
        certificates: The trust anchors, in file order
        source: Path the material was read from
        container: Detected format, "pkcs12" or "pem"
    """
    certificates: Tuple[x509.Certificate, ...]
    source: str
    container: str

    def __len__(self) -> int:
        return len(self.certificates)

    def subjects(self) -> List[str]:
        """RFC 4514 subject names of the trust anchors."""
        return [cert.subject.rfc4514_string() for cert in self.certificates]

    def to_pem(self) -> str:
        """Render the trust anchors as one PEM bundle."""
        return "".join(
            cert.public_bytes(serialization.Encoding.PEM).decode("ascii")
            for cert in self.certificates
        )


def load_trust_store(path: PathLike, password: Union[bytes, str, None]) -> TrustMaterial:
    """
    Load trusted certificates from a keystore file.

    Args:
        path: Path of the keystore file
        password: Keystore password; str is encoded as UTF-8. Ignored for PEM.

    Returns:
        TrustMaterial with at least one certificate

    Raises:
        TrustStoreIOError: The file is missing or unreadable
        TrustStoreFormatError: The file is not a supported keystore or has no certificates
        TrustStorePasswordError: The file is PKCS#12 but the password is wrong
    """
    source = os.fspath(path)
    if isinstance(password, str):
        password = password.encode("utf-8")

    logger.info(f"Loading trust store: path={source}")

    try:
        with open(source, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Cannot read trust store {source}: {e}")
        raise TrustStoreIOError(f"Cannot read trust store {source}: {e}") from e

    if not data:
        raise TrustStoreFormatError(f"Trust store {source} is empty")

    if data[:4] in (JKS_MAGIC, JCEKS_MAGIC):
        raise TrustStoreFormatError(
            f"Trust store {source} is a legacy JKS/JCEKS keystore; convert it with "
            f"'keytool -importkeystore -srckeystore {source} -destkeystore <out.p12> "
            f"-deststoretype PKCS12'"
        )

    if PEM_CERTIFICATE_MARKER in data:
        certificates = _load_pem(data, source)
        container = "pem"
    else:
        certificates = _load_pkcs12(data, password, source)
        container = "pkcs12"

    if not certificates:
        raise TrustStoreFormatError(f"Trust store {source} contains no certificates")

    material = TrustMaterial(certificates=tuple(certificates), source=source, container=container)
    logger.info(
        f"Loaded {len(material)} trusted certificate(s) from {container} store: "
        f"{'; '.join(material.subjects())}"
    )
    return material


def _load_pem(data: bytes, source: str) -> List[x509.Certificate]:
    try:
        return x509.load_pem_x509_certificates(data)
    except ValueError as e:
        raise TrustStoreFormatError(f"Trust store {source} has an invalid PEM certificate: {e}") from e


def _load_pkcs12(data: bytes, password: bytes, source: str) -> List[x509.Certificate]:
    try:
        _key, certificate, additional = pkcs12.load_key_and_certificates(data, password or None)
    except (ValueError, TypeError) as e:
        # cryptography reports "bad password" and "not PKCS#12" the same way;
        # a well-formed PFX header means the bytes are fine and the password is not
        if _looks_like_pfx(data):
            logger.error(f"Wrong password for trust store {source}")
            raise TrustStorePasswordError(f"Wrong password for trust store {source}") from e
        raise TrustStoreFormatError(f"Trust store {source} is not a PKCS#12 or PEM keystore") from e

    certificates = list(additional)
    if certificate is not None:
        certificates.insert(0, certificate)
    return certificates


def _looks_like_pfx(data: bytes) -> bool:
    """
    Check the outer PFX structure: SEQUENCE { INTEGER 3, ... }.

    Handles short, long and indefinite (BER) length forms of the SEQUENCE.
    """
    if len(data) < 5 or data[0] != 0x30:
        return False
    length_byte = data[1]
    offset = 2 if length_byte < 0x80 else 2 + (length_byte & 0x7F)
    return data[offset:offset + 3] == b"\x02\x01\x03"


def save_pkcs12_trust_store(
    certificates: Iterable[x509.Certificate],
    path: PathLike,
    password: Union[bytes, str, None],
) -> None:
    """
    Write certificates to a password-protected PKCS#12 trust store (no private key).

    Args:
        certificates: CA certificates to trust
        path: Destination file (overwritten)
        password: Store password; str is encoded as UTF-8. Empty or None writes it unencrypted.

    Raises:
        TrustStoreFormatError: No certificates were given
        TrustStoreIOError: The file cannot be written
    """
    cas = list(certificates)
    if not cas:
        raise TrustStoreFormatError("A trust store needs at least one certificate")
    if isinstance(password, str):
        password = password.encode("utf-8")

    if password:
        encryption = serialization.BestAvailableEncryption(password)
    else:
        encryption = serialization.NoEncryption()

    data = pkcs12.serialize_key_and_certificates(
        name=None, key=None, cert=None, cas=cas, encryption_algorithm=encryption
    )

    destination = os.fspath(path)
    try:
        with open(destination, "wb") as f:
            f.write(data)
    except OSError as e:
        raise TrustStoreIOError(f"Cannot write trust store {destination}: {e}") from e

    logger.info(f"Wrote PKCS#12 trust store with {len(cas)} certificate(s) to {destination}")
