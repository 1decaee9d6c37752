"""
Hostcheck Test Suite

Unit tests for the parsing, probing and reporting helpers, the pyinfra facts
and every check in the catalog. Commands are served by a fake process runner
(see conftest.py); no test reads real host state.
"""
