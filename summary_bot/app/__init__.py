# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot application package."""

__version__ = "0.1.0"
