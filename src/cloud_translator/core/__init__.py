# SPDX-License-Identifier: Apache-2.0
"""Wire data models and canonical error codes."""
