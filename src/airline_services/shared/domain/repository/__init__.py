from .repository import Repository as Repository
from .unit_of_work import AbstractUnitOfWork as AbstractUnitOfWork
