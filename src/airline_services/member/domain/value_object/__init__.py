from .membership_number import MembershipNumber as MembershipNumber
