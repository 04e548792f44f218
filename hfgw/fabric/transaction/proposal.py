import logging

from hfgw.fabric.errors import PhaseError
from hfgw.fabric.transaction.transaction import Transaction, TransactionPhase
from hfgw.protos.gateway import gateway_pb2

_logger = logging.getLogger(__name__)


class Proposal(object):
    """A signed proposal that can be evaluated or endorsed once.

    The phase moves to EVALUATING or ENDORSING before the call goes out, so a
    concurrent second use fails fast. A failed call returns it to BUILT.
    """

    def __init__(self, client, channel, transaction_id, signed_proposal, signing_identity):
        self._client = client
        self._channel = channel
        self._transaction_id = transaction_id
        self._signed_proposal = signed_proposal
        self._signing_identity = signing_identity
        self._phase = TransactionPhase.BUILT

    @property
    def transaction_id(self):
        return self._transaction_id

    @property
    def phase(self):
        return self._phase

    @property
    def signed_proposal(self):
        return self._signed_proposal

    def bytes(self):
        return self._signed_proposal.SerializeToString()

    def _check_built(self, operation):
        if self._phase != TransactionPhase.BUILT:
            raise PhaseError(f'Proposal {self._transaction_id} cannot be {operation} in phase {self._phase.value}')

    async def evaluate(self):
        """Run the proposal on a peer without ordering it.

        Returns: the chaincode result bytes
        """
        method = 'evaluate'
        self._check_built('evaluated')

        request = gateway_pb2.EvaluateRequest()
        request.transaction_id = self._transaction_id
        request.channel_id = self._channel
        request.proposed_transaction.CopyFrom(self._signed_proposal)

        _logger.debug(f'{method} - transaction_id: {self._transaction_id}')
        self._phase = TransactionPhase.EVALUATING
        try:
            response = await self._client.evaluate(request)
        except BaseException:
            self._phase = TransactionPhase.BUILT
            raise
        self._phase = TransactionPhase.EVALUATED

        return bytes(response.result.payload)

    async def endorse(self):
        """Collect endorsements for the proposal.

        Returns: Transaction holding the unsigned prepared envelope
        """
        method = 'endorse'
        self._check_built('endorsed')

        request = gateway_pb2.EndorseRequest()
        request.transaction_id = self._transaction_id
        request.channel_id = self._channel
        request.proposed_transaction.CopyFrom(self._signed_proposal)

        _logger.debug(f'{method} - transaction_id: {self._transaction_id}')
        self._phase = TransactionPhase.ENDORSING
        try:
            response = await self._client.endorse(request)
        except BaseException:
            self._phase = TransactionPhase.BUILT
            raise
        self._phase = TransactionPhase.ENDORSED

        return Transaction(self._client, self._channel, self._transaction_id,
                           response.prepared_transaction, self._signing_identity)
