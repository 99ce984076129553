"""Plain text rendering of aggregation results and load errors."""
from io import StringIO
from typing import Iterable

from models.schemas import AggregationResult, User


class TxtRenderer:
    """Renders the token report as tab-indented text."""

    def user_txt_partial(self, user: User) -> str:
        return (
            f"\t\t{user.last_name}, {user.first_name}, {user.email}\n"
            f"\t\t\tPrevious Token Balance, {user.tokens}\n"
            f"\t\t\tNew Token Balance, {user.new_token_balance}\n"
        )

    def render(self, data: Iterable[AggregationResult]) -> str:
        """Render every company block in the given order."""
        output = StringIO()
        for item in data:
            output.write(f"\tCompany Id: {item.company.id}\n")
            output.write(f"\tCompany Name: {item.company.name}\n")
            output.write("\tUsers Emailed:\n")
            for user in item.users_emailed:
                output.write(self.user_txt_partial(user))
            output.write("\tUsers Not Emailed:\n")
            for user in item.users_not_emailed:
                output.write(self.user_txt_partial(user))
            output.write(f"\tTotal amount of top ups for {item.company.name}: {item.total_tops_up}\n\n")
        return output.getvalue()

    def render_errors(self, errors: Iterable[str]) -> str:
        output = StringIO()
        output.write("Errors:\n")
        for error in errors:
            output.write(f"\t{error}\n")
        return output.getvalue()
