"""
API server package — HTTP interface.

Exposes the wallet approval report to clients and maps service errors to
JSON error bodies. Delegates all decision logic to the analytics layer.
"""
