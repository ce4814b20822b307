from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.platform.exception.exceptions import InputValidationError
from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.entity.rating_entity import validate_rating_input
from src.service.marketplace.domain.entity.subscription_entity import Subscription
from src.service.marketplace.domain.enum.offer_category import OfferCategory
from test.service.marketplace.unit.test_helpers import make_offer


pytestmark = pytest.mark.unit


class TestOffer:
    def test_create_normalizes_fields(self):
        offer = Offer.create(
            created_by=1,
            title='  Zapatillas ',
            category='OUTLET_ZAPATOS',
            town=' Alcoy ',
            price='19.99',
            store_name='Lola',
            contact='600123456',
            description='  ',
        )

        assert offer.title == 'Zapatillas'
        assert offer.town == 'Alcoy'
        assert offer.price == Decimal('19.99')
        assert offer.category is OfferCategory.OUTLET_ZAPATOS
        assert offer.description is None

    def test_create_reports_all_invalid_fields(self):
        with pytest.raises(InputValidationError) as exc_info:
            Offer.create(
                created_by=1,
                title='ab',
                category='JOYAS',
                town='A',
                price=-1,
                store_name='L',
                contact='123',
            )

        assert set(exc_info.value.fields) == {
            'title',
            'category',
            'town',
            'price',
            'store_name',
            'contact',
        }

    def test_apply_changes_keeps_owner(self):
        offer = make_offer()

        updated = offer.apply_changes({'title': 'Botas', 'price': 10})

        assert updated.title == 'Botas'
        assert updated.price == Decimal('10.00')
        assert updated.created_by == offer.created_by

    def test_owner_is_not_editable(self):
        with pytest.raises(InputValidationError) as exc_info:
            make_offer().apply_changes({'created_by': 99})
        assert 'created_by' in exc_info.value.fields

    def test_is_active(self):
        today = date(2026, 5, 1)
        assert make_offer(expires_at=None).is_active(today)
        assert make_offer(expires_at=today).is_active(today)
        assert not make_offer(expires_at=today - timedelta(days=1)).is_active(today)


class TestSubscription:
    def test_create_dedupes_categories(self):
        subscription = Subscription.create(
            user_id=2, town=' Alcoy ', categories=['OUTLET_ROPA', 'OTROS', 'OUTLET_ROPA']
        )

        assert subscription.town == 'Alcoy'
        assert subscription.categories == [OfferCategory.OUTLET_ROPA, OfferCategory.OTROS]

    def test_requires_town_and_known_categories(self):
        with pytest.raises(InputValidationError) as exc_info:
            Subscription.create(user_id=2, town='  ', categories=[])
        assert set(exc_info.value.fields) == {'town', 'categories'}

        with pytest.raises(InputValidationError):
            Subscription.create(user_id=2, town='Alcoy', categories=['JOYAS'])

    def test_matches(self):
        subscription = Subscription.create(user_id=2, town='Alcoy', categories=['OTROS'])

        assert subscription.matches(town='Alcoy', category=OfferCategory.OTROS)
        assert not subscription.matches(town='Elche', category=OfferCategory.OTROS)
        assert not subscription.matches(town='Alcoy', category=OfferCategory.OUTLET_ROPA)


class TestValidateRatingInput:
    @pytest.mark.parametrize('rating', [1, 3, 5])
    def test_valid(self, rating):
        assert validate_rating_input(rating=rating, comment=None) == {}

    @pytest.mark.parametrize('rating', [0, 6, 4.5, '5', True, None])
    def test_invalid(self, rating):
        assert 'rating' in validate_rating_input(rating=rating, comment=None)

    def test_long_comment(self):
        assert 'comment' in validate_rating_input(rating=5, comment='x' * 1001)
