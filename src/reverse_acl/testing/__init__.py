"""Testing – fixture writers and property-based strategies for ACL tests."""
