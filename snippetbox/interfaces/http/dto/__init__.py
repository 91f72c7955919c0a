# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .snippets import PERMITTED_EXPIRES, SnippetCreateForm
from .users import UserLoginForm, UserSignupForm

__all__ = ["PERMITTED_EXPIRES", "SnippetCreateForm", "UserLoginForm", "UserSignupForm"]
