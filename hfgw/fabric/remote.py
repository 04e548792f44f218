import logging
from hashlib import sha256
from urllib.parse import urlparse

import grpc

from hfgw.fabric.errors import ConfigurationError
from hfgw.util.utils import get_config_setting, pem_to_der, proto_b

MAX_SEND = 'grpc.max_send_message_length'
MAX_RECEIVE = 'grpc.max_receive_message_length'
MAX_SEND_V10 = 'grpc-max-send-message-length'
MAX_RECEIVE_V10 = 'grpc-max-receive-message-length'

USE_WAIT_FOR_READY = 'useWaitForReady'
SSL_TARGET_NAME_OVERRIDE = 'ssl-target-name-override'

# keys of opts that are not grpc channel options
_NON_GRPC_OPTIONS = ('pem', 'clientKey', 'clientCert', 'name', SSL_TARGET_NAME_OVERRIDE,
                     'request-timeout', 'grpc-wait-for-ready-timeout', USE_WAIT_FOR_READY,
                     MAX_SEND_V10, MAX_RECEIVE_V10)

_logger = logging.getLogger(__name__)


class Endpoint(object):
    """Address and channel credentials of a grpc:// or grpcs:// url.

    Args:
        url (str): grpc://host:port or grpcs://host:port
        pem (str|bytes): PEM root certificate(s), required for grpcs
        clientKey (str|bytes): PEM client private key for mutual TLS
        clientCert (str|bytes): PEM client certificate for mutual TLS
    """

    def __init__(self, url, pem=None, clientKey=None, clientCert=None):

        purl = urlparse(url)
        self.protocol = purl.scheme

        if not purl.hostname:
            raise ConfigurationError(f'Invalid url: {url}. A host is required')

        self.addr = f'{purl.hostname}:{purl.port}' if purl.port else purl.hostname
        self.client_cert = clientCert

        if self.protocol == 'grpc':
            self.creds = None
        elif self.protocol == 'grpcs':
            if not isinstance(pem, (str, bytes)) or not pem:
                raise ConfigurationError('PEM encoded certificate is required.')

            if clientCert and clientKey:
                self.creds = grpc.ssl_channel_credentials(proto_b(pem),
                                                          private_key=proto_b(clientKey),
                                                          certificate_chain=proto_b(clientCert))
            else:
                self.creds = grpc.ssl_channel_credentials(proto_b(pem))
        else:
            raise ConfigurationError(f'Invalid protocol: {self.protocol}. URLs must begin with grpc:// or grpcs://')

    def isTLS(self):
        return self.protocol == 'grpcs'

    def client_cert_hash(self):
        """sha256 of the DER client certificate, None without mutual TLS."""
        if self.client_cert:
            return sha256(pem_to_der(self.client_cert)).digest()

        return None


def _check_integer_config(opts, name):
    value = opts.get(name)
    if value is None:
        return False
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f'Expect an integer value of {name}, found {type(value).__name__}')
    return True


class Remote(object):
    """A remote node: its endpoint plus the grpc options to reach it.

    Args:
        url (str): grpc:// or grpcs:// url
        opts (dict): pem, clientKey, clientCert, name,
            ssl-target-name-override, request-timeout (ms),
            grpc-wait-for-ready-timeout (ms), useWaitForReady and any
            grpc.* channel option
    """

    def __init__(self, url, opts=None):

        opts = dict(opts or {})
        self._options = {}

        # default
        self.useWaitForReady = False

        for key in opts:
            value = opts[key]

            if key == USE_WAIT_FOR_READY:
                if isinstance(value, bool):
                    self.useWaitForReady = value
                continue
            if key in _NON_GRPC_OPTIONS:
                continue
            if value is not None and not isinstance(value, (str, int)):
                raise ConfigurationError(f'invalid grpc option value:{key}-> {value} expected string|integer')
            self._options[key] = value

        # connection options
        if isinstance(opts.get(SSL_TARGET_NAME_OVERRIDE), str):
            self._options['grpc.ssl_target_name_override'] = opts[SSL_TARGET_NAME_OVERRIDE]
            self._options['grpc.default_authority'] = opts[SSL_TARGET_NAME_OVERRIDE]

        self._options[MAX_RECEIVE] = self._message_limit(opts, MAX_RECEIVE_V10, MAX_RECEIVE)
        self._options[MAX_SEND] = self._message_limit(opts, MAX_SEND_V10, MAX_SEND)

        self._url = url
        self._endpoint = Endpoint(url, opts.get('pem'), opts.get('clientKey'), opts.get('clientCert'))

        if opts.get('name'):
            self._name = opts['name']
        else:
            self._name = url.split('//')[-1]

        if _check_integer_config(opts, 'request-timeout'):
            self._request_timeout = opts['request-timeout']
        else:
            self._request_timeout = get_config_setting('request-timeout', 30000)  # default 30 seconds

        if _check_integer_config(opts, 'grpc-wait-for-ready-timeout'):
            self._grpc_wait_for_ready_timeout = opts['grpc-wait-for-ready-timeout']
        else:
            self._grpc_wait_for_ready_timeout = get_config_setting('grpc-wait-for-ready-timeout', 3000)  # default 3 seconds

        _logger.debug(f' ** Remote instance url: {self._url}, name: {self._name}, options loaded are:: {self._options}')

    @staticmethod
    def _message_limit(opts, legacy_name, name):
        if legacy_name in opts:
            value = opts[legacy_name]
        elif name in opts:
            value = opts[name]
        else:
            value = get_config_setting(legacy_name)
            if value is None:
                value = get_config_setting(name)

        if value is None:
            value = -1  # default is unlimited

        return value

    @property
    def name(self):
        return self._name

    @property
    def url(self):
        return self._url

    @property
    def endpoint(self):
        return self._endpoint

    @property
    def request_timeout(self):
        """Request timeout in milliseconds."""
        return self._request_timeout

    @property
    def grpc_wait_for_ready_timeout(self):
        """Connection wait timeout in milliseconds."""
        return self._grpc_wait_for_ready_timeout

    @property
    def grpc_options(self):
        """Channel options in the list of tuples form grpc expects."""
        return list(self._options.items())

    def getClientCertHash(self):
        return self._endpoint.client_cert_hash()

    def isTLS(self):
        return self._endpoint.isTLS()

    def __str__(self):
        return f'Remote: {self._url}'
