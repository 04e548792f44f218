import enum
import logging

from hfgw.fabric.block_decoder import decode_result
from hfgw.fabric.errors import PhaseError
from hfgw.protos.common import common_pb2
from hfgw.protos.gateway import gateway_pb2
from hfgw.protos.peer import transaction_pb2
from hfgw.protos.utils import create_envelope

_logger = logging.getLogger(__name__)


class TransactionPhase(enum.Enum):
    BUILT = 'built'
    EVALUATING = 'evaluating'
    EVALUATED = 'evaluated'
    ENDORSING = 'endorsing'
    ENDORSED = 'endorsed'
    SUBMITTING = 'submitting'
    SUBMITTED = 'submitted'


class CommitStatus(object):
    """Validation outcome of a committed transaction."""

    def __init__(self, transaction_id, code, block_number):
        self.transaction_id = transaction_id
        self.code = code
        self.block_number = block_number

    @property
    def successful(self):
        return self.code == transaction_pb2.VALID

    @property
    def code_name(self):
        return transaction_pb2.TxValidationCode.Name(self.code)

    def __repr__(self):
        return f'CommitStatus({self.transaction_id}, {self.code_name}, block={self.block_number})'


class Transaction(object):
    """An endorsed transaction, ready to be signed and submitted.

    Args:
        client (GatewayClient): client used for submit and commit status
        channel (str): channel name
        transaction_id (str): id of the endorsed proposal
        prepared_transaction (common_pb2.Envelope): envelope returned by the
            endorsement, unsigned
        signing_identity (SigningIdentity): signs the envelope payload and
            the commit status request
    """

    def __init__(self, client, channel, transaction_id, prepared_transaction, signing_identity):
        self._client = client
        self._channel = channel
        self._transaction_id = transaction_id
        self._envelope = common_pb2.Envelope()
        self._envelope.CopyFrom(prepared_transaction)
        self._signing_identity = signing_identity
        self._decoded = None
        self._phase = TransactionPhase.ENDORSED
        self._signing = False

    @property
    def transaction_id(self):
        return self._transaction_id

    @property
    def phase(self):
        return self._phase

    @property
    def envelope(self):
        return self._envelope

    @property
    def decoded_result(self):
        if self._decoded is None:
            self._decoded = decode_result(self._envelope)
        return self._decoded

    @property
    def result(self):
        """Chaincode result carried by the endorsement, known before submit."""
        return self.decoded_result.payload

    async def sign(self):
        """Sign the envelope payload unless it is already signed.

        Only an ENDORSED transaction can be signed, and only by one caller at
        a time.
        """
        if self._phase != TransactionPhase.ENDORSED:
            raise PhaseError(f'Transaction {self._transaction_id} cannot be signed in phase {self._phase.value}')
        await self._sign_envelope()

    async def _sign_envelope(self):
        if self._envelope.signature:
            return
        if self._signing:
            raise PhaseError(f'Transaction {self._transaction_id} is already being signed')

        self._signing = True
        try:
            signature = await self._signing_identity.sign(self._envelope.payload)
        finally:
            self._signing = False
        self._envelope.CopyFrom(create_envelope(signature, self._envelope.payload))

    async def submit(self):
        """Sign when needed, then send the envelope to be ordered.

        A failed submit leaves the transaction ENDORSED so it can be retried.

        Returns: the chaincode result bytes
        """
        method = 'submit'

        if self._phase != TransactionPhase.ENDORSED:
            raise PhaseError(f'Transaction {self._transaction_id} cannot be submitted in phase {self._phase.value}')
        self._phase = TransactionPhase.SUBMITTING

        try:
            result = self.decoded_result.payload
            await self._sign_envelope()

            request = gateway_pb2.SubmitRequest()
            request.transaction_id = self._transaction_id
            request.channel_id = self._channel
            request.prepared_transaction.CopyFrom(self._envelope)

            _logger.debug(f'{method} - transaction_id: {self._transaction_id}')
            await self._client.submit(request)
        except BaseException:
            self._phase = TransactionPhase.ENDORSED
            raise

        self._phase = TransactionPhase.SUBMITTED
        return result

    async def get_status(self, checkpointer=None):
        """Commit status of the submitted transaction.

        Args:
            checkpointer (Checkpointer): records the transaction as processed
                when given

        Returns: CommitStatus
        """
        method = 'get_status'

        if self._phase != TransactionPhase.SUBMITTED:
            raise PhaseError(f'Commit status of {self._transaction_id} is only available after submit')

        status_request = gateway_pb2.CommitStatusRequest()
        status_request.transaction_id = self._transaction_id
        status_request.channel_id = self._channel
        status_request.identity = self._signing_identity.serialize()

        request_bytes = status_request.SerializeToString()
        signed_request = gateway_pb2.SignedCommitStatusRequest()
        signed_request.request = request_bytes
        signed_request.signature = await self._signing_identity.sign(request_bytes)

        response = await self._client.commit_status(signed_request)
        status = CommitStatus(self._transaction_id, response.result, response.block_number)
        _logger.debug(f'{method} - {status}')

        if checkpointer is not None:
            await checkpointer.checkpoint_transaction(status.block_number, status.transaction_id)

        return status
