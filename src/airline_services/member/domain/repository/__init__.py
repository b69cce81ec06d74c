from .member_repository import MemberRepository as MemberRepository
