import logging

from hfgw.fabric.errors import ConfigurationError
from hfgw.util.crypto import crypto

_logger = logging.getLogger(__name__)

NONCE_SIZE = 24


class TransactionID(object):
    """Nonce and the transaction id derived from it.

    transaction id = hex(sha256(nonce + serialized creator identity))
    """

    def __init__(self, signer_or_identity):
        _logger.debug('constructor - start')

        if not signer_or_identity:
            raise ConfigurationError('Missing identity or signing identity parameter')

        if isinstance(signer_or_identity, (bytes, bytearray)):
            creator_bytes = bytes(signer_or_identity)
        else:
            creator_bytes = signer_or_identity.serialize()

        self._nonce = crypto.generate_nonce(NONCE_SIZE)
        self._creator = creator_bytes
        trans_hash = crypto.hash(self._nonce + creator_bytes)
        self._transaction_id = trans_hash.hexdigest()
        _logger.debug(f'const - transaction_id {self._transaction_id}')

    @property
    def transaction_id(self):
        return self._transaction_id

    @property
    def nonce(self):
        return self._nonce

    @property
    def creator(self):
        return self._creator

    def __str__(self):
        return self._transaction_id
