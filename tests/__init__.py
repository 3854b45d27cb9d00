# SPDX-License-Identifier: Apache-2.0
"""
VikingDB SDK tests

Unit and pipeline tests for the core helpers (tests/core) and the vector
client (tests/vector). HTTP is faked in-process with httpx.MockTransport.
"""
