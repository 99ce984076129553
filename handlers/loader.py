"""Loading of company and user JSON files into typed record lists."""
import json
import logging
from typing import List

from pydantic import ValidationError

from models.schemas import Company, User
from utils.file_operations import read_json_array, resolve_data_path, sanitize_data_for_logging

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')


class LoadError(Exception):
    """An input file could not be read, parsed or turned into records."""

    def __init__(self, message, source=None):
        super().__init__(message)
        self.message = message
        self.source = source


class BaseList:
    """A list of records loaded from a JSON array.

    Subclasses set ``list_class`` to the model each element is built into.
    """
    list_class = None

    def __init__(self, items=None):
        self.items = list(items) if items is not None else []

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @classmethod
    def load_from_json(cls, file_name):
        """Load a list from a JSON file.

        Args:
            file_name: Name of the JSON file, relative to the data folder, or an absolute path

        Returns:
            A new instance populated with one record per array element

        Raises:
            LoadError: If the file is unreadable, not a JSON array, or holds an invalid record
        """
        file_path = resolve_data_path(file_name)
        try:
            data = read_json_array(file_path)
        except json.JSONDecodeError as je:
            raise LoadError(f"Invalid JSON format in {file_path}: {str(je)}", source=file_path) from je
        except ValueError as ve:
            raise LoadError(str(ve), source=file_path) from ve
        except OSError as e:
            raise LoadError(f"Error reading file {file_path}: {str(e)}", source=file_path) from e

        items = []
        for index, item in enumerate(data):
            try:
                items.append(cls.list_class(**item))
            except ValidationError as e:
                debug_logger.debug(f"Rejected record: {sanitize_data_for_logging(item)}")
                raise LoadError(
                    f"Invalid {cls.list_class.__name__} record at index {index} in {file_path}: {str(e)}",
                    source=file_path,
                ) from e

        app_logger.info(f"Loaded {len(items)} {cls.list_class.__name__} records from {file_path}")
        return cls(items)


class CompanyList(BaseList):
    """Companies loaded from JSON."""
    list_class = Company


class UserList(BaseList):
    """Users loaded from JSON."""
    list_class = User

    def users_for_company(self, company_id: int) -> List[User]:
        """Users belonging to the company, in source order."""
        return [user for user in self.items if user.company_id == company_id]


def load_companies(source) -> List[Company]:
    return CompanyList.load_from_json(source).items


def load_users(source) -> List[User]:
    return UserList.load_from_json(source).items
