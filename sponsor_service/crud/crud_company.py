#/sponsor_service/crud/crud_company.py
from .base import CRUDBase
from sponsor_service.models.company import Company
from sponsor_service.models.venue import Venue


class CRUDCompany(CRUDBase[Company]):
    pass


class CRUDVenue(CRUDBase[Venue]):
    pass


company = CRUDCompany(Company)
venue = CRUDVenue(Venue)
