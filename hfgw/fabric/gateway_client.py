import logging

import grpc
from google.protobuf.message import DecodeError
from google.rpc import status_pb2

from hfgw.fabric.errors import GatewayRPCError
from hfgw.protos.gateway import gateway_pb2, gateway_pb2_grpc

STATUS_DETAILS_KEY = 'grpc-status-details-bin'
ERROR_DETAIL_TYPE = 'gateway.ErrorDetail'

_logger = logging.getLogger(__name__)


def error_details(rpc_error):
    """Decode the gateway.ErrorDetail records of a failed call.

    Records are carried as google.rpc.Status details in the
    grpc-status-details-bin trailer. Undecodable trailers yield no records.
    """
    trailing_metadata = rpc_error.trailing_metadata() or ()
    details = []
    for key, value in trailing_metadata:
        if key != STATUS_DETAILS_KEY:
            continue
        try:
            status = status_pb2.Status.FromString(value)
            for detail in status.details:
                if detail.type_url.split('/')[-1] == ERROR_DETAIL_TYPE:
                    details.append(gateway_pb2.ErrorDetail.FromString(detail.value))
        except DecodeError as e:
            _logger.debug(f'error_details - unable to decode {STATUS_DETAILS_KEY}: {e}')
    return details


class GatewayClient(object):
    """Unary calls of the gateway service, with a common timeout.

    Args:
        channel (grpc.aio.Channel): channel to the gateway peer
        request_timeout (int): timeout of each call in milliseconds
        wait_for_ready (bool): queue calls until the channel is ready
    """

    def __init__(self, channel, request_timeout=30000, wait_for_ready=False):
        self._channel = channel
        self._stub = gateway_pb2_grpc.GatewayStub(channel)
        self._timeout = request_timeout / 1000 if request_timeout else None
        self._wait_for_ready = wait_for_ready

    @property
    def channel(self):
        return self._channel

    async def _call(self, name, request):
        method = name
        _logger.debug(f'{method} - transaction_id: {getattr(request, "transaction_id", "")}')

        try:
            return await getattr(self._stub, name)(request,
                                                   timeout=self._timeout,
                                                   wait_for_ready=self._wait_for_ready)
        except grpc.aio.AioRpcError as e:
            _logger.debug(f'{method} - failed with {e.code()}: {e.details()}')
            raise GatewayRPCError(e.code(), e.details(), error_details(e)) from e

    async def evaluate(self, request):
        """Returns: gateway_pb2.EvaluateResponse"""
        return await self._call('Evaluate', request)

    async def endorse(self, request):
        """Returns: gateway_pb2.EndorseResponse"""
        return await self._call('Endorse', request)

    async def submit(self, request):
        """Returns: gateway_pb2.SubmitResponse"""
        return await self._call('Submit', request)

    async def commit_status(self, request):
        """Returns: gateway_pb2.CommitStatusResponse"""
        return await self._call('CommitStatus', request)

    async def close(self):
        if self._channel is not None:
            _logger.debug('close - closing gateway channel')
            await self._channel.close()
            self._channel = None
