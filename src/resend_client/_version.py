# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
__version__ = "0.1.0"

USER_AGENT = f"resend-client/{__version__}"
