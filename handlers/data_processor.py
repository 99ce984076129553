"""Aggregation of users into per-company token top-up results."""
import logging
from typing import Iterable, List, Optional

import config
from handlers.loader import CompanyList, LoadError, UserList
from models.schemas import AggregationResult, Company, ProcessingOutcome, User

# Get loggers
app_logger = logging.getLogger('app')
error_logger = logging.getLogger('error')
debug_logger = logging.getLogger('debug')


def is_emailed(company: Company, user: User) -> bool:
    """A user is emailed when the company sends email and the user has not opted out."""
    return company.emails_enabled() and not user.opted_out()


def _last_name(user: User) -> str:
    """Sort key for the emailed and not emailed lists."""
    return user.last_name


class DataProcessor:
    """Joins users to companies and computes top-ups and email groupings."""

    def process(self, companies_file_name: Optional[str] = None,
                users_file_name: Optional[str] = None) -> ProcessingOutcome:
        """Load both inputs and aggregate them.

        Args:
            companies_file_name: Companies JSON file (defaults to config.COMPANIES_FILE)
            users_file_name: Users JSON file (defaults to config.USERS_FILE)

        Returns:
            ProcessingOutcome with either the results or a single load error
        """
        companies_file_name = companies_file_name or config.COMPANIES_FILE
        users_file_name = users_file_name or config.USERS_FILE

        try:
            company_list = CompanyList.load_from_json(companies_file_name)
            user_list = UserList.load_from_json(users_file_name)
        except LoadError as e:
            error_msg = f"Failed to load json data. {e.message}"
            error_logger.error(error_msg, exc_info=True)
            app_logger.warning(error_msg)
            return ProcessingOutcome.failure(error_msg)

        results = self.aggregate(company_list.items, user_list)
        app_logger.info(f"Aggregated {len(results)} companies")
        return ProcessingOutcome.success(results)

    def aggregate(self, companies: Iterable[Company], users: Iterable[User]) -> List[AggregationResult]:
        """Build one result per company, ordered by company id.

        Balances are recomputed from ``tokens`` on every pass, so each active
        user of a known company is topped up exactly once. Users
        whose company is unknown are left out of every result.
        """
        user_list = users if isinstance(users, UserList) else UserList(users)
        sorted_companies = sorted(companies, key=lambda company: company.id)

        known_ids = {company.id for company in sorted_companies}
        orphans = [user.id for user in user_list if user.company_id not in known_ids]
        if orphans:
            debug_logger.debug(f"Skipping users with unknown company: {orphans}")

        return [self._aggregate_company(company, user_list.users_for_company(company.id))
                for company in sorted_companies]

    def _aggregate_company(self, company: Company, company_users: List[User]) -> AggregationResult:
        users_emailed = []
        users_not_emailed = []
        total_tops_up = 0

        for user in company_users:
            # every pass starts from the loaded token count
            user.reset_balance()
            if user.is_active():
                total_tops_up += company.top_up
                user.top_up(company.top_up)

            if is_emailed(company, user):
                users_emailed.append(user)
            else:
                users_not_emailed.append(user)

        # list.sort is stable, ties keep source order
        users_emailed.sort(key=_last_name)
        users_not_emailed.sort(key=_last_name)

        debug_logger.debug(
            f"Company {company.id}: {len(users_emailed)} emailed, "
            f"{len(users_not_emailed)} not emailed, top ups {total_tops_up}"
        )
        return AggregationResult(
            company=company,
            users_emailed=users_emailed,
            users_not_emailed=users_not_emailed,
            total_tops_up=total_tops_up,
        )
