"""Rejection messages of the create pokemon use case."""

POKEMON_REQUIRED = "A pokemon is required."
BLANK_NAME = "The pokemon name must not be blank."
BIRTH_DATE_REQUIRED = "The pokemon birth date is required."
NON_POSITIVE_ID = "{field} must be a positive integer."
ID_TOO_LARGE = "{field} must not be greater than {max_id}."

POKEMON_ALREADY_EXISTS = "This pokemon already exists."
CATEGORY_NOT_FOUND = "This category doesn't exist, please check the id and try again."
OWNER_NOT_FOUND = "This owner doesn't exist, please check the id and try again."
TYPE_NOT_FOUND = "This type doesn't exist, please check the id and try again."
SAVE_FAILED = "Something went wrong saving this pokemon."
