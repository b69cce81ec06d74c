import pytest

from airline_services.member.domain import Gender, Member, MembershipNumber


class TestMembershipNumber:
    def test_valid_membership_number(self):
        assert str(MembershipNumber("0000000001")) == "0000000001"

    def test_invalid_format_raises_error(self):
        with pytest.raises(ValueError, match="Invalid membership number format: 12AB"):
            MembershipNumber("12AB")

    @pytest.mark.parametrize("value", [None, ""])
    def test_parse_returns_none_when_not_supplied(self, value):
        assert MembershipNumber.parse(value) is None


class TestMember:
    @pytest.fixture
    def member(self):
        return Member(
            id=MembershipNumber("0000000001"),
            family_name="山田",
            given_name="花子",
            kana_family_name="ヤマダ",
            kana_given_name="ハナコ",
            gender=Gender.FEMALE,
        )

    def test_is_same_person(self, member):
        assert member.is_same_person("ヤマダ", "ハナコ", Gender.FEMALE)

    def test_kana_is_normalized_before_comparison(self, member):
        """ひらがな・半角カナでも同一人物と判定される"""
        assert member.is_same_person("やまだ", "ﾊﾅｺ", Gender.FEMALE)

    def test_different_gender_is_not_same_person(self, member):
        assert not member.is_same_person("ヤマダ", "ハナコ", Gender.MALE)

    def test_different_name_is_not_same_person(self, member):
        assert not member.is_same_person("ヤマダ", "タロウ", Gender.FEMALE)

    def test_repr_lists_fields(self, member):
        assert repr(member) == (
            "Member(membership_number=0000000001, kana_family_name=ヤマダ, "
            "kana_given_name=ハナコ, gender=F)"
        )
