"""
Houses the tests for the REST api layer of the program.

The tests are set up primarily to assert that the formatting
of the responses remains stable, and that the system returns
the expected errors when interacted with incorrectly. They run
against a real store backed by an in-memory database, which is
seeded before and emptied after each test.
"""
