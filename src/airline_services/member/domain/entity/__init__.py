from .member import Member as Member
