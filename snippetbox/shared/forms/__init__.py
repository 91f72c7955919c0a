# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .binder import FormState, decode_post_form

__all__ = ["FormState", "decode_post_form"]
