# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors
