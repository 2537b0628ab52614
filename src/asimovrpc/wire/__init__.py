"""
Wire - Data definitions for the Asimov JSON-RPC API.

Request parameter types, decoded response records and the JSON Schema
documents for the JSON-RPC 2.0 envelopes.
"""
