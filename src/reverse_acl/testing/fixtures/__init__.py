"""Testing fixtures – direct ACL row writers."""
from reverse_acl.testing.fixtures.acl import AclFixtureWriter

__all__ = ["AclFixtureWriter"]
