"""EIP-155 chain registry.

See :py:class:`chainregistry.chain.Chain`.
"""
