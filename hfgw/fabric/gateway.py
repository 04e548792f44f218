import logging
import os

import grpc
import yaml

from hfgw.fabric.errors import ConfigurationError
from hfgw.fabric.gateway_client import GatewayClient
from hfgw.fabric.msp.identity import Identity, PrivateKeySigner
from hfgw.fabric.network import Network
from hfgw.fabric.peer import Peer
from hfgw.util.utils import get_config_setting, maybe_await, proto_b

_logger = logging.getLogger(__name__)


def _peer_url(endpoint, tls):
    if '://' in endpoint:
        return endpoint
    return f'grpcs://{endpoint}' if tls else f'grpc://{endpoint}'


def _load_pem(entry, base_dir=None, name='pem'):
    """Read PEM material given inline or as {path: ...} / {pem: ...}."""
    if isinstance(entry, (str, bytes)):
        return proto_b(entry)

    if not isinstance(entry, dict):
        raise ConfigurationError(f'Missing {name} in connection profile')

    if entry.get('pem'):
        return proto_b(entry['pem'])

    if entry.get('path'):
        path = entry['path']
        if base_dir and not os.path.isabs(path):
            path = os.path.join(base_dir, path)
        with open(path, 'rb') as f:
            return f.read()

    raise ConfigurationError(f'{name} needs either "pem" or "path"')


class Gateway(object):
    """Connection to a Fabric Gateway peer on behalf of one client identity.

    Use Gateway.new_builder(), Gateway.new_gateway() or
    Gateway.load_from_config() to create one. Closing the gateway closes the
    underlying grpc channel.
    """

    def __init__(self, client, identity=None, signer=None, tls_cert_hash=None, peer=None):
        if not client:
            raise ConfigurationError('Missing required parameter "client".')

        self._client = client
        self._identity = identity
        self._signer = signer
        self._tls_cert_hash = tls_cert_hash
        self._peer = peer

    @staticmethod
    def new_builder():
        return GatewayBuilder()

    @staticmethod
    async def new_gateway(msp_id, peer_endpoint, tls_root_cert, client_cert, client_key,
                          peer_host_alias=None, client_tls_cert=None, client_tls_key=None):
        """Connect over TLS with a PEM certificate and PKCS#8 private key.

        Args:
            msp_id (str): MSP id of the client organization
            peer_endpoint (str): host:port or grpcs://host:port of the peer
            tls_root_cert (bytes): PEM TLS root certificate of the peer
            client_cert (bytes): PEM certificate of the client identity
            client_key (bytes): PEM private key of the client identity
            peer_host_alias (str): TLS host name override
            client_tls_cert (bytes): PEM client TLS certificate, mutual TLS
            client_tls_key (bytes): PEM client TLS private key, mutual TLS

        Returns: Gateway
        """
        identity = Identity(msp_id, client_cert)
        signer = PrivateKeySigner.from_pem(client_key)

        opts = {'pem': tls_root_cert}
        if peer_host_alias:
            opts['ssl-target-name-override'] = peer_host_alias
        if client_tls_cert and client_tls_key:
            opts['clientCert'] = client_tls_cert
            opts['clientKey'] = client_tls_key

        peer = Peer(_peer_url(peer_endpoint, True), opts)
        _logger.debug(f'new_gateway - {msp_id} to {peer.url}')

        return Gateway(peer.gateway_client, identity, signer, peer.getClientCertHash(), peer)

    @staticmethod
    async def load_from_config(profile):
        """Connect using a connection profile, a YAML file path or a dict.

        Profile keys: mspId, peer (url, tlsCACerts, hostnameOverride,
        grpcOptions), identity (certificate, privateKey), optional clientTls
        (certificate, privateKey). PEM entries are {pem: ...} or
        {path: ...}, relative paths resolve against the profile directory.
        """
        method = 'load_from_config'
        base_dir = None

        if isinstance(profile, str):
            base_dir = os.path.dirname(os.path.abspath(profile))
            with open(profile, 'r') as f:
                profile = yaml.safe_load(f)

        if not isinstance(profile, dict):
            raise ConfigurationError('Connection profile must be a mapping')

        msp_id = profile.get('mspId')
        peer_config = profile.get('peer')
        identity_config = profile.get('identity')
        if not msp_id:
            raise ConfigurationError('Connection profile is missing "mspId"')
        if not isinstance(peer_config, dict) or not peer_config.get('url'):
            raise ConfigurationError('Connection profile is missing "peer.url"')
        if not isinstance(identity_config, dict):
            raise ConfigurationError('Connection profile is missing "identity"')

        opts = dict(peer_config.get('grpcOptions') or {})
        url = peer_config['url']
        if url.startswith('grpcs://'):
            opts['pem'] = _load_pem(peer_config.get('tlsCACerts'), base_dir, 'peer.tlsCACerts')
        if peer_config.get('hostnameOverride'):
            opts['ssl-target-name-override'] = peer_config['hostnameOverride']

        client_tls = profile.get('clientTls')
        if client_tls is not None and not isinstance(client_tls, dict):
            raise ConfigurationError('Connection profile "clientTls" must be a mapping')
        if client_tls:
            opts['clientCert'] = _load_pem(client_tls.get('certificate'), base_dir, 'clientTls.certificate')
            opts['clientKey'] = _load_pem(client_tls.get('privateKey'), base_dir, 'clientTls.privateKey')

        identity = Identity(msp_id, _load_pem(identity_config.get('certificate'), base_dir, 'identity.certificate'))
        signer = PrivateKeySigner.from_pem(_load_pem(identity_config.get('privateKey'), base_dir,
                                                     'identity.privateKey'))

        peer = Peer(url, opts)
        _logger.debug(f'{method} - {msp_id} to {peer.url}')

        return Gateway(peer.gateway_client, identity, signer, peer.getClientCertHash(), peer)

    @property
    def identity(self):
        return self._identity

    @property
    def client(self):
        return self._client

    def get_network(self, name):
        return Network(name, self._client, self._identity, self._signer, self._tls_cert_hash)

    async def evaluate_transaction(self, channel_name, chaincode_name, transaction_name, args=None,
                                   transient_data=None):
        contract = self.get_network(channel_name).get_contract(chaincode_name)
        return await contract.evaluate_transaction(transaction_name, args, transient_data)

    async def submit_transaction(self, channel_name, chaincode_name, transaction_name, args=None,
                                 transient_data=None):
        contract = self.get_network(channel_name).get_contract(chaincode_name)
        return await contract.submit_transaction(transaction_name, args, transient_data)

    async def wait_for_ready(self):
        """Wait for the peer connection, a no-op for caller supplied clients."""
        if self._peer is not None:
            await self._peer.wait_for_ready()

    async def close(self):
        _logger.debug('close - closing gateway')
        if self._peer is not None:
            await self._peer.close()
        elif hasattr(self._client, 'close'):
            await maybe_await(self._client.close())

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.close()


class GatewayBuilder(object):
    """Step by step Gateway configuration, finished by connect()."""

    def __init__(self):
        self._connection = None
        self._identity_bytes = None
        self._signer = None
        self._adapter = None

    def connection(self, connection):
        """host:port or grpc(s):// url, a grpc.aio.Channel or a gateway client."""
        self._connection = connection
        return self

    def identity_bytes(self, identity):
        self._identity_bytes = identity
        return self

    def signer(self, signer):
        self._signer = signer
        return self

    def identity_signer_adapter(self, adapter):
        """Take both the identity and the signing from a SignerAdapter."""
        self._adapter = adapter
        return self

    def _build_client(self):
        connection = self._connection
        timeout = get_config_setting('request-timeout', 30000)

        if connection is None:
            raise ConfigurationError('Connection not configured')
        if isinstance(connection, grpc.aio.Channel):
            return GatewayClient(connection, timeout), None
        if isinstance(connection, str):
            peer = Peer(_peer_url(connection, False))
            return peer.gateway_client, peer
        if all(hasattr(connection, name) for name in ('evaluate', 'endorse', 'submit', 'commit_status')):
            return connection, None

        raise TypeError(f'Unsupported connection type: {type(connection).__name__}')

    async def connect(self):
        client, peer = self._build_client()

        if self._adapter is not None:
            identity = await maybe_await(self._adapter.identity())
            signer = self._adapter
        else:
            identity = self._identity_bytes
            signer = self._signer

        _logger.debug(f'connect - identity configured: {identity is not None}, signer configured: {signer is not None}')
        return Gateway(client, identity, signer, peer=peer)
