from .entity import Member as Member
from .enum import Gender as Gender
from .repository import MemberRepository as MemberRepository
from .value_object import MembershipNumber as MembershipNumber
