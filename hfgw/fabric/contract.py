import logging

from hfgw.fabric.errors import ConfigurationError
from hfgw.fabric.msp.identity import SigningIdentity
from hfgw.fabric.transaction.proposal import Proposal
from hfgw.fabric.transaction.proposal_builder import build_signed_proposal, qualified_transaction_name
from hfgw.fabric.transaction.transaction_id import TransactionID

_logger = logging.getLogger(__name__)


class Contract(object):
    """A smart contract deployed as a chaincode on a channel.

    Args:
        chaincode_name (str): chaincode name
        client (GatewayClient): client to the gateway peer
        channel (str): channel name
        identity: Identity or serialized identity bytes
        signer: Signer, SignerAdapter or callable signing message bytes
        contract_name (str): contract within the chaincode, qualifies every
            transaction name as "contract:name"
        tls_cert_hash (bytes): client TLS certificate hash for mutual TLS
    """

    def __init__(self, chaincode_name, client, channel, identity=None, signer=None,
                 contract_name=None, tls_cert_hash=None):

        if not chaincode_name:
            raise ValueError('Missing required parameter "chaincode_name"')

        self._chaincode_name = chaincode_name
        self._contract_name = contract_name
        self._client = client
        self._channel = channel
        self._identity = identity
        self._signer = signer
        self._tls_cert_hash = tls_cert_hash
        self._signing_identity = None

    @property
    def chaincode_name(self):
        return self._chaincode_name

    @property
    def contract_name(self):
        return self._contract_name

    @property
    def channel(self):
        return self._channel

    @property
    def client(self):
        return self._client

    def _get_signing_identity(self):
        if self._identity is None:
            _logger.error('identity not configured for Contract')
            raise ConfigurationError('identity not configured for Contract')
        if self._signer is None:
            _logger.error('signer not configured for Contract')
            raise ConfigurationError('signer not configured for Contract')

        if self._signing_identity is None:
            self._signing_identity = SigningIdentity(self._identity, self._signer)
        return self._signing_identity

    async def new_proposal(self, transaction_name, args=None, transient_data=None):
        """Build and sign a proposal without sending it.

        Returns: Proposal, to be evaluated or endorsed
        """
        method = 'new_proposal'

        signing_identity = self._get_signing_identity()
        tx_id = TransactionID(signing_identity)
        name = qualified_transaction_name(transaction_name, self._contract_name)

        _logger.debug(f'{method} - {self._channel}/{self._chaincode_name} {name} tx_id: {tx_id.transaction_id}')

        signed_proposal = await build_signed_proposal(self._channel,
                                                      self._chaincode_name,
                                                      name,
                                                      args=args,
                                                      transient_map=transient_data,
                                                      signing_identity=signing_identity,
                                                      tx_id=tx_id,
                                                      tls_cert_hash=self._tls_cert_hash)

        return Proposal(self._client, self._channel, tx_id.transaction_id, signed_proposal, signing_identity)

    async def evaluate_transaction(self, transaction_name, args=None, transient_data=None):
        """Query the ledger: one evaluate call, nothing is ordered.

        Returns: the chaincode result bytes
        """
        proposal = await self.new_proposal(transaction_name, args, transient_data)
        return await proposal.evaluate()

    async def submit_transaction(self, transaction_name, args=None, transient_data=None):
        """Endorse, sign and submit a transaction.

        Returns: the chaincode result bytes
        """
        proposal = await self.new_proposal(transaction_name, args, transient_data)
        transaction = await proposal.endorse()
        return await transaction.submit()

    def __str__(self):
        return f'Contract: {self._chaincode_name} on {self._channel}'
