# Copyright 281165273@qq.com. All Rights Reserved.
#
# SPDX-License-Identifier: Apache-2.0
import logging
import re

from hfgw.fabric.contract import Contract

_logger = logging.getLogger(__name__)


class Network(object):
    """A channel reached through the gateway.

    Contracts obtained from a network share its client, identity and signer.
    """

    def __init__(self, name, client, identity=None, signer=None, tls_cert_hash=None):
        """Construct network instance

        Args:
            name (str): channel name
            client (GatewayClient): client to the gateway peer
            identity: Identity or serialized identity bytes
            signer: Signer, SignerAdapter or callable
            tls_cert_hash (bytes): client TLS certificate hash for mutual TLS
        """
        pat = "^[a-z][a-z0-9.-]*$"  # matching patter for regex checker
        if not name or not re.match(pat, name):
            raise ValueError(f'Failed to create Network. channel name should'
                             f' match Regex {pat}, but got {name}')

        if not client:
            raise ValueError('Failed to create Network. Missing requirement "client" parameter.')

        self._name = name
        self._client = client
        self._identity = identity
        self._signer = signer
        self._tls_cert_hash = tls_cert_hash

        _logger.debug(f'Constructed Network instance name - {self._name}')

    @property
    def name(self):
        return self._name

    def get_contract(self, chaincode_name, contract_name=None):
        return Contract(chaincode_name, self._client, self._name,
                        identity=self._identity,
                        signer=self._signer,
                        contract_name=contract_name,
                        tls_cert_hash=self._tls_cert_hash)

    def __str__(self):
        return f'Network: {self._name}'
