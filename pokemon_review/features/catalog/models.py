"""Database models for the pokemon review catalog."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokemon_review.db.session import Base

# Largest value the Integer id columns hold
MAX_ID = 2**31 - 1


class Pokemon(Base):
    """A pokemon; its name is unique across the catalog."""

    __tablename__ = "pokemons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    categories: Mapped[list["PokemonCategory"]] = relationship(
        back_populates="pokemon", cascade="all, delete-orphan"
    )
    owners: Mapped[list["PokemonOwner"]] = relationship(
        back_populates="pokemon", cascade="all, delete-orphan"
    )
    types: Mapped[list["PokemonType"]] = relationship(
        back_populates="pokemon", cascade="all, delete-orphan"
    )
    reviews: Mapped[list["Review"]] = relationship(
        back_populates="pokemon", cascade="all, delete-orphan"
    )


class Category(Base):
    """Category model (e.g. Mouse, Seed)."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    pokemons: Mapped[list["PokemonCategory"]] = relationship(back_populates="category")


class Owner(Base):
    """Owner model; a trainer that can own several pokemons."""

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    gym: Mapped[str | None] = mapped_column(String(100), nullable=True)

    pokemons: Mapped[list["PokemonOwner"]] = relationship(back_populates="owner")


class Type(Base):
    """Elemental type model (e.g. Electric, Water)."""

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    pokemons: Mapped[list["PokemonType"]] = relationship(back_populates="type")


class PokemonCategory(Base):
    """Join record between a pokemon and a category."""

    __tablename__ = "pokemon_categories"

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemons.id", ondelete="CASCADE"), primary_key=True
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"), primary_key=True
    )

    pokemon: Mapped[Pokemon] = relationship(back_populates="categories")
    category: Mapped[Category] = relationship(back_populates="pokemons")


class PokemonOwner(Base):
    """Join record between a pokemon and an owner."""

    __tablename__ = "pokemon_owners"

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemons.id", ondelete="CASCADE"), primary_key=True
    )
    owner_id: Mapped[int] = mapped_column(ForeignKey("owners.id"), primary_key=True)

    pokemon: Mapped[Pokemon] = relationship(back_populates="owners")
    owner: Mapped[Owner] = relationship(back_populates="pokemons")


class PokemonType(Base):
    """Join record between a pokemon and a type."""

    __tablename__ = "pokemon_types"

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemons.id", ondelete="CASCADE"), primary_key=True
    )
    type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), primary_key=True)

    pokemon: Mapped[Pokemon] = relationship(back_populates="types")
    type: Mapped[Type] = relationship(back_populates="pokemons")


class Reviewer(Base):
    """Person writing reviews."""

    __tablename__ = "reviewers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    reviews: Mapped[list["Review"]] = relationship(back_populates="reviewer")


class Review(Base):
    """Review of one pokemon written by one reviewer."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemons.id", ondelete="CASCADE"), nullable=False
    )
    reviewer_id: Mapped[int] = mapped_column(
        ForeignKey("reviewers.id"), nullable=False
    )

    pokemon: Mapped[Pokemon] = relationship(back_populates="reviews")
    reviewer: Mapped[Reviewer] = relationship(back_populates="reviews")

    # Constraints
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="review_rating_range"),
    )
