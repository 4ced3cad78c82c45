"""Tests for the CreatePokemonUseCase with mocked repositories."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from pokemon_review.core.outcomes import OutcomeKind, ReferenceKind
from pokemon_review.features.catalog.dtos import CreatePokemonRequest, ReviewPlaceholder
from pokemon_review.features.catalog.models import Pokemon
from pokemon_review.features.catalog.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyPokemonRepository,
    SqlAlchemyTypeRepository,
)
from pokemon_review.features.catalog.usecases import CreatePokemonUseCaseImpl
from pokemon_review.features.catalog.usecases.create_pokemon_usecase import (
    CATEGORY_NOT_FOUND,
    OWNER_NOT_FOUND,
    POKEMON_ALREADY_EXISTS,
    SAVE_FAILED,
    TYPE_NOT_FOUND,
)


@pytest.fixture
def mock_pokemon_repository():
    """Pokemon repository where the name is free and saving succeeds."""
    repository = AsyncMock(spec=SqlAlchemyPokemonRepository)
    repository.exists_by_name.return_value = False

    async def create(pokemon: Pokemon, *_ids: int) -> bool:
        pokemon.id = 7
        return True

    repository.create.side_effect = create
    return repository


@pytest.fixture
def mock_category_repository():
    repository = AsyncMock(spec=SqlAlchemyCategoryRepository)
    repository.exists.return_value = True
    return repository


@pytest.fixture
def mock_owner_repository():
    repository = AsyncMock(spec=SqlAlchemyOwnerRepository)
    repository.exists.return_value = True
    return repository


@pytest.fixture
def mock_type_repository():
    repository = AsyncMock(spec=SqlAlchemyTypeRepository)
    repository.exists.return_value = True
    return repository


@pytest.fixture
def use_case(
    mock_pokemon_repository,
    mock_category_repository,
    mock_owner_repository,
    mock_type_repository,
) -> CreatePokemonUseCaseImpl:
    """Create a CreatePokemonUseCaseImpl with mocked dependencies."""
    return CreatePokemonUseCaseImpl(
        pokemon_repository=mock_pokemon_repository,
        category_repository=mock_category_repository,
        owner_repository=mock_owner_repository,
        type_repository=mock_type_repository,
    )


@pytest.fixture
def request_dto() -> CreatePokemonRequest:
    return CreatePokemonRequest(
        name="Pikachu",
        birth_date=date(1903, 1, 1),
        category_id=1,
        owner_id=2,
        type_id=3,
    )


class TestCreatePokemonUseCase:
    """Test suite for the CreatePokemonUseCase check chain."""

    async def test_create_pokemon_successfully(
        self, use_case, request_dto, mock_pokemon_repository
    ):
        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.SUCCESS
        assert outcome.status_code == 200
        assert outcome.value is not None
        assert outcome.value.id == 7
        assert outcome.value.name == "Pikachu"
        assert outcome.value.birth_date == date(1903, 1, 1)

        mock_pokemon_repository.create.assert_awaited_once()
        pokemon, category_id, owner_id, type_id = (
            mock_pokemon_repository.create.await_args.args
        )
        assert isinstance(pokemon, Pokemon)
        assert pokemon.name == "Pikachu"
        assert (category_id, owner_id, type_id) == (1, 2, 3)

    async def test_create_pokemon_attaches_review_placeholders(
        self, use_case, request_dto, mock_pokemon_repository
    ):
        # Arrange
        request_dto.reviews = [
            ReviewPlaceholder(title="Great", text="Fast", rating=4, reviewer_id=9)
        ]

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.is_success
        pokemon = mock_pokemon_repository.create.await_args.args[0]
        assert len(pokemon.reviews) == 1
        assert pokemon.reviews[0].reviewer_id == 9
        assert pokemon.reviews[0].rating == 4

    async def test_create_pokemon_without_request(
        self,
        use_case,
        mock_pokemon_repository,
        mock_category_repository,
        mock_owner_repository,
        mock_type_repository,
    ):
        # Act
        outcome = await use_case.execute(None)

        # Assert
        assert outcome.kind is OutcomeKind.INVALID_REQUEST
        assert outcome.status_code == 400
        assert outcome.detail
        mock_pokemon_repository.exists_by_name.assert_not_awaited()
        mock_category_repository.exists.assert_not_awaited()
        mock_owner_repository.exists.assert_not_awaited()
        mock_type_repository.exists.assert_not_awaited()
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_create_pokemon_with_blank_name(
        self, use_case, request_dto, mock_pokemon_repository
    ):
        # Arrange
        request_dto.name = "   "

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.INVALID_REQUEST
        assert "blank" in outcome.detail
        mock_pokemon_repository.exists_by_name.assert_not_awaited()

    async def test_create_pokemon_with_non_positive_id(
        self, use_case, mock_pokemon_repository
    ):
        # Arrange - bypass field validation the way a non-HTTP caller could
        request = CreatePokemonRequest.model_construct(
            name="Pikachu",
            birth_date=date(1903, 1, 1),
            category_id=1,
            owner_id=0,
            type_id=3,
            reviews=[],
        )

        # Act
        outcome = await use_case.execute(request)

        # Assert
        assert outcome.kind is OutcomeKind.INVALID_REQUEST
        assert outcome.detail == "owner_id must be a positive integer."
        mock_pokemon_repository.exists_by_name.assert_not_awaited()

    async def test_create_pokemon_without_birth_date(
        self, use_case, mock_pokemon_repository
    ):
        # Arrange
        request = CreatePokemonRequest.model_construct(
            name="Mew", category_id=1, owner_id=1, type_id=1, reviews=[]
        )

        # Act
        outcome = await use_case.execute(request)

        # Assert
        assert outcome.kind is OutcomeKind.INVALID_REQUEST
        assert outcome.detail == "The pokemon birth date is required."
        mock_pokemon_repository.exists_by_name.assert_not_awaited()
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_create_pokemon_with_id_beyond_column_range(
        self, use_case, mock_pokemon_repository, mock_category_repository
    ):
        # Arrange
        request = CreatePokemonRequest.model_construct(
            name="Mew",
            birth_date=date(1996, 2, 27),
            category_id=10**20,
            owner_id=1,
            type_id=1,
            reviews=[],
        )

        # Act
        outcome = await use_case.execute(request)

        # Assert
        assert outcome.kind is OutcomeKind.INVALID_REQUEST
        assert outcome.detail == "category_id must not be greater than 2147483647."
        mock_category_repository.exists.assert_not_awaited()

    async def test_create_pokemon_duplicate_name(
        self,
        use_case,
        request_dto,
        mock_pokemon_repository,
        mock_category_repository,
        mock_owner_repository,
        mock_type_repository,
    ):
        # Arrange
        mock_pokemon_repository.exists_by_name.return_value = True

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.DUPLICATE_ENTITY
        assert outcome.status_code == 422
        assert outcome.detail == "This pokemon already exists."
        assert outcome.detail == POKEMON_ALREADY_EXISTS
        mock_pokemon_repository.exists_by_name.assert_awaited_once_with("Pikachu")
        mock_category_repository.exists.assert_not_awaited()
        mock_owner_repository.exists.assert_not_awaited()
        mock_type_repository.exists.assert_not_awaited()
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_create_pokemon_unknown_category_reported_first(
        self,
        use_case,
        request_dto,
        mock_pokemon_repository,
        mock_category_repository,
        mock_owner_repository,
        mock_type_repository,
    ):
        # Arrange - every reference is dangling
        mock_category_repository.exists.return_value = False
        mock_owner_repository.exists.return_value = False
        mock_type_repository.exists.return_value = False

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.MISSING_REFERENCE
        assert outcome.reference is ReferenceKind.CATEGORY
        assert outcome.status_code == 422
        assert (
            outcome.detail
            == "This category doesn't exist, please check the id and try again."
        )
        assert outcome.detail == CATEGORY_NOT_FOUND
        mock_category_repository.exists.assert_awaited_once_with(1)
        mock_owner_repository.exists.assert_not_awaited()
        mock_type_repository.exists.assert_not_awaited()
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_create_pokemon_unknown_owner(
        self,
        use_case,
        request_dto,
        mock_pokemon_repository,
        mock_owner_repository,
        mock_type_repository,
    ):
        # Arrange
        mock_owner_repository.exists.return_value = False
        mock_type_repository.exists.return_value = False

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.MISSING_REFERENCE
        assert outcome.reference is ReferenceKind.OWNER
        assert outcome.detail == OWNER_NOT_FOUND
        mock_owner_repository.exists.assert_awaited_once_with(2)
        mock_type_repository.exists.assert_not_awaited()
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_create_pokemon_unknown_type(
        self, use_case, request_dto, mock_pokemon_repository, mock_type_repository
    ):
        # Arrange
        mock_type_repository.exists.return_value = False

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.MISSING_REFERENCE
        assert outcome.reference is ReferenceKind.TYPE
        assert (
            outcome.detail
            == "This type doesn't exist, please check the id and try again."
        )
        assert outcome.detail == TYPE_NOT_FOUND
        mock_type_repository.exists.assert_awaited_once_with(3)
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_create_pokemon_repository_reports_failure(
        self, use_case, request_dto, mock_pokemon_repository
    ):
        # Arrange
        mock_pokemon_repository.create.side_effect = None
        mock_pokemon_repository.create.return_value = False

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.PERSISTENCE_FAILURE
        assert outcome.status_code == 500
        assert outcome.detail == "Something went wrong saving this pokemon."
        assert outcome.value is None

    async def test_create_pokemon_store_error_does_not_propagate(
        self, use_case, request_dto, mock_owner_repository, mock_pokemon_repository
    ):
        # Arrange
        mock_owner_repository.exists.side_effect = ConnectionError("database is down")

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert outcome.kind is OutcomeKind.PERSISTENCE_FAILURE
        assert outcome.detail == SAVE_FAILED
        mock_pokemon_repository.create.assert_not_awaited()

    async def test_checks_run_in_fixed_order(
        self,
        use_case,
        request_dto,
        mock_pokemon_repository,
        mock_category_repository,
        mock_owner_repository,
        mock_type_repository,
    ):
        # Arrange
        calls: list[str] = []

        def record(name: str, result: bool):
            async def side_effect(*_args):
                calls.append(name)
                return result

            return side_effect

        mock_pokemon_repository.exists_by_name.side_effect = record("name", False)
        mock_category_repository.exists.side_effect = record("category", True)
        mock_owner_repository.exists.side_effect = record("owner", True)
        mock_type_repository.exists.side_effect = record("type", True)
        mock_pokemon_repository.create.side_effect = record("create", False)

        # Act
        outcome = await use_case.execute(request_dto)

        # Assert
        assert calls == ["name", "category", "owner", "type", "create"]
        assert outcome.kind is OutcomeKind.PERSISTENCE_FAILURE
