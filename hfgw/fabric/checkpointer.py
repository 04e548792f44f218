import logging

_logger = logging.getLogger(__name__)


class Checkpointer(object):
    """Records how far an application has processed the ledger.

    block_number is the next block to process, transaction_ids the
    transactions already processed within it.
    """

    async def checkpoint_block(self, block_number):
        raise NotImplementedError

    async def checkpoint_transaction(self, block_number, transaction_id):
        raise NotImplementedError

    @property
    def block_number(self):
        raise NotImplementedError

    @property
    def transaction_ids(self):
        raise NotImplementedError


class InMemoryCheckpointer(Checkpointer):

    def __init__(self):
        self._block_number = None
        self._transaction_ids = set()

    async def checkpoint_block(self, block_number):
        self._block_number = block_number + 1
        self._transaction_ids = set()
        _logger.debug(f'checkpoint_block - next block {self._block_number}')

    async def checkpoint_transaction(self, block_number, transaction_id):
        if self._block_number != block_number:
            self._block_number = block_number
            self._transaction_ids = set()
        self._transaction_ids.add(transaction_id)
        _logger.debug(f'checkpoint_transaction - block {block_number} transaction {transaction_id}')

    @property
    def block_number(self):
        return self._block_number

    @property
    def transaction_ids(self):
        return frozenset(self._transaction_ids)
