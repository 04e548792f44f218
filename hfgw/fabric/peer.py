import asyncio
import logging

import grpc

from hfgw.fabric.errors import GatewayRPCError
from hfgw.fabric.gateway_client import GatewayClient
from hfgw.fabric.remote import Remote

_logger = logging.getLogger(__name__)


class Peer(Remote):
    """A gateway peer, the grpc.aio channel to it is created on first use."""

    def __init__(self, url, opts=None):

        super(Peer, self).__init__(url, opts)

        _logger.debug(f'Peer.const - url: {url} timeout: {self._request_timeout} name: {self.name}')

        self._gateway_channel = None
        self._gateway_client = None

    def _createClients(self):
        if not self._gateway_client:
            _logger.debug(f'_createClients - create peer gateway connection {self._endpoint.addr}')
            if self._endpoint.creds is None:
                self._gateway_channel = grpc.aio.insecure_channel(self._endpoint.addr, self.grpc_options)
            else:
                self._gateway_channel = grpc.aio.secure_channel(self._endpoint.addr, self._endpoint.creds,
                                                                self.grpc_options)
            self._gateway_client = GatewayClient(self._gateway_channel,
                                                 self._request_timeout,
                                                 self.useWaitForReady)

    @property
    def gateway_client(self):
        self._createClients()
        return self._gateway_client

    async def wait_for_ready(self):
        """Wait until the channel is connected.

        Raises GatewayRPCError with UNAVAILABLE once
        grpc-wait-for-ready-timeout (ms) elapses.
        """
        self._createClients()
        timeout = self._grpc_wait_for_ready_timeout / 1000
        try:
            await asyncio.wait_for(self._gateway_channel.channel_ready(), timeout)
        except asyncio.TimeoutError as e:
            _logger.debug(f'wait_for_ready - {self._endpoint.addr} not ready after {timeout}s')
            raise GatewayRPCError(grpc.StatusCode.UNAVAILABLE,
                                  f'{self._endpoint.addr} not ready after {timeout}s') from e

    async def close(self):
        if self._gateway_client:
            _logger.debug(f'close - closing peer gateway connection {self._endpoint.addr}')
            await self._gateway_client.close()
            self._gateway_client = None
            self._gateway_channel = None

    def __str__(self):
        return f'Peer: {self._url}'
