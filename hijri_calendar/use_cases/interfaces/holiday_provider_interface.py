from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Dict


class HolidayProviderInterface(ABC):
    """Directory of national public holidays."""

    @abstractmethod
    async def fetch_holidays(self, country_code: str, year: int) -> Dict[str, str]:
        """
        Return a sparse map of ``YYYY-MM-DD`` to the local holiday name.

        Raises:
            HolidayDataUnavailable: the directory could not be read
        """
        pass
