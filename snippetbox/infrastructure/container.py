# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from snippetbox.application.services.password_hashing import WerkzeugPasswordHasher
from snippetbox.application.use_cases.users.login_user import LoginUserUseCase
from snippetbox.application.use_cases.users.register_user import RegisterUserUseCase
from snippetbox.infrastructure.db import Database
from snippetbox.infrastructure.repositories import (SqlAlchemySnippetRepository,
                                                    SqlAlchemyUserRepository)
from snippetbox.infrastructure.sessions import (ServerSideSessionInterface,
                                                SqlAlchemySessionStore)
from snippetbox.interfaces.http.controllers.snippets_controller import SnippetsController
from snippetbox.interfaces.http.controllers.users_controller import UsersController
from snippetbox.interfaces.http.templates import (TemplateCache, TemplateFunctions,
                                                  default_functions)
from snippetbox.shared.config import AppConfig


class Container:
    def __init__(
        self, config: AppConfig, *, template_functions: TemplateFunctions | None = None
    ) -> None:
        self.config = config
        self._template_functions = template_functions or default_functions()

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def templates(self) -> TemplateCache:
        return TemplateCache.build(self.config.ui.template_dir, self._template_functions)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(self.config.security.password_hash_method)

    @cached_property
    def snippet_repository(self) -> SqlAlchemySnippetRepository:
        return SqlAlchemySnippetRepository(self.database)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def session_store(self) -> SqlAlchemySessionStore:
        return SqlAlchemySessionStore(self.database)

    @cached_property
    def session_interface(self) -> ServerSideSessionInterface:
        return ServerSideSessionInterface(
            self.session_store, self.config.session, self.config.security
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def snippets_controller(self) -> SnippetsController:
        return SnippetsController(snippets=self.snippet_repository, templates=self.templates)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            templates=self.templates,
        )
