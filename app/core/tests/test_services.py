"""Tests for BaseService helpers."""

import logging

import pytest
from django.db import transaction

from core.services import BaseService


class ExampleService(BaseService):
    pass


class TestBaseService:
    def test_logger_is_named_after_service_module_and_class(self):
        logger = ExampleService.get_logger()

        assert isinstance(logger, logging.Logger)
        assert logger.name.endswith("ExampleService")

    @pytest.mark.django_db
    def test_atomic_opens_transaction(self):
        with ExampleService.atomic():
            assert transaction.get_connection().in_atomic_block
