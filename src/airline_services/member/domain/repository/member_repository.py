from abc import abstractmethod

from airline_services.member.domain.entity import Member
from airline_services.member.domain.value_object import MembershipNumber
from airline_services.shared.domain import Repository


class MemberRepository(Repository[Member, MembershipNumber]):
    """カード会員リポジトリのインターフェース

    予約処理では会員番号による参照のみを利用する。
    """

    @abstractmethod
    def find_by_id(self, membership_number: MembershipNumber) -> Member | None:
        """会員番号で検索する"""
        raise NotImplementedError
