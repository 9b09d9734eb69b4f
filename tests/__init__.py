# Copyright 2025 The finexpr Authors
# SPDX-License-Identifier: Apache-2.0

"""
finexpr test suite.
"""
