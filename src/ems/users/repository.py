from __future__ import annotations

from typing import Optional

from ..common.crud import CrudRepository


class UserRepository(CrudRepository):
    def username_taken(self, username: str, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def employee_has_account(self, employee_id: int, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def employee_ids_with_accounts(self) -> set[int]:
        raise NotImplementedError
