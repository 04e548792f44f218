import hashlib
import logging
import os

from cryptography import x509
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature

from hfgw.fabric.errors import EncodingError

CURVE_P_256_Size = 256
CURVE_P_384_Size = 384

SHA2 = 'SHA2'

DEFAULT_NONCE_SIZE = 24

_logger = logging.getLogger(__name__)

# group orders of the supported curves, used for low-S canonicalization
_CURVES = {
    CURVE_P_256_Size: {
        'curve': ec.SECP256R1,
        'hash': hashes.SHA256,
        'order': int('FFFFFFFF00000000FFFFFFFFFFFFFFFF'
                     'BCE6FAADA7179E84F3B9CAC2FC632551', 16),
    },
    CURVE_P_384_Size: {
        'curve': ec.SECP384R1,
        'hash': hashes.SHA384,
        'order': int('FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF'
                     'C7634D81F4372DDF581A0DB248B0A77AECEC196ACCC52973', 16),
    },
}


def generate_nonce(size=DEFAULT_NONCE_SIZE):
    """Generate a nonce from the OS secure random source.

    :param size: number of bytes
    :return: bytes
    """
    return os.urandom(size)


def hash(data):
    """SHA-256 hash object over data, use .digest() or .hexdigest()."""
    return hashlib.sha256(data)


class Ecies(object):
    """ECDSA crypto suite.

    Signs with low-S canonicalized, DER encoded signatures, which is the
    only form Fabric peers accept.
    """

    def __init__(self, security_level=CURVE_P_256_Size, hash_algorithm=SHA2):
        if security_level not in _CURVES:
            raise ValueError(f'Unsupported security level: {security_level}')
        if hash_algorithm != SHA2:
            raise ValueError(f'Unsupported hash algorithm: {hash_algorithm}')

        self._security_level = security_level
        self._curve = _CURVES[security_level]['curve']
        self._hash = _CURVES[security_level]['hash']
        self._order = _CURVES[security_level]['order']
        self._half_order = self._order >> 1

    @property
    def security_level(self):
        return self._security_level

    @property
    def order(self):
        return self._order

    @property
    def half_order(self):
        return self._half_order

    def hash(self, message):
        digest = hashes.Hash(self._hash(), backend=default_backend())
        digest.update(message)
        return digest.finalize()

    def generate_private_key(self):
        return ec.generate_private_key(self._curve(), default_backend())

    def load_private_key(self, key_bytes, password=None):
        """Load a PKCS#8 EC private key from PEM or DER bytes.

        Raises:
            EncodingError: the material is malformed or not a key on
                this suite's curve
        """
        if isinstance(key_bytes, str):
            key_bytes = key_bytes.encode()
        if not key_bytes:
            raise EncodingError('Missing private key material')

        try:
            if key_bytes.lstrip().startswith(b'-----BEGIN'):
                private_key = serialization.load_pem_private_key(key_bytes, password, default_backend())
            else:
                private_key = serialization.load_der_private_key(key_bytes, password, default_backend())
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise EncodingError(f'Unable to parse private key: {e}') from e

        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            raise EncodingError('Private key is not an elliptic curve key')
        if private_key.curve.name != self._curve.name:
            raise EncodingError(f'Private key curve {private_key.curve.name} does not match {self._curve.name}')

        return private_key

    def load_certificate(self, certificate_bytes):
        if isinstance(certificate_bytes, str):
            certificate_bytes = certificate_bytes.encode()
        try:
            return x509.load_pem_x509_certificate(certificate_bytes, default_backend())
        except ValueError as e:
            raise EncodingError(f'Unable to parse certificate: {e}') from e

    def sign(self, private_key, message):
        """ECDSA sign message, hashing it internally.

        :param private_key: EllipticCurvePrivateKey
        :param message: raw message bytes, never a precomputed digest
        :return: DER encoded signature with s in the lower half of the order
        """
        signature = private_key.sign(message, ec.ECDSA(self._hash()))
        return self._prevent_malleability(signature)

    def verify(self, public_key, message, signature):
        try:
            if not self._check_malleability(signature):
                return False
        except ValueError:
            _logger.debug('verify - signature is not a DER encoded ECDSA signature')
            return False
        try:
            public_key.verify(signature, message, ec.ECDSA(self._hash()))
        except InvalidSignature:
            return False
        return True

    def _prevent_malleability(self, signature):
        r, s = decode_dss_signature(signature)
        if s > self._half_order:
            s = self._order - s
        return encode_dss_signature(r, s)

    def _check_malleability(self, signature):
        _, s = decode_dss_signature(signature)
        return s <= self._half_order


def ecies(security_level=CURVE_P_256_Size, hash_algorithm=SHA2):
    return Ecies(security_level, hash_algorithm)
