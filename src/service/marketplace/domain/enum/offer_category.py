from enum import StrEnum


class OfferCategory(StrEnum):
    OUTLET_ROPA = 'OUTLET_ROPA'
    OUTLET_TECNO = 'OUTLET_TECNO'
    OUTLET_HOGAR = 'OUTLET_HOGAR'
    OUTLET_ZAPATOS = 'OUTLET_ZAPATOS'
    OUTLET_BELLEZA = 'OUTLET_BELLEZA'
    OTROS = 'OTROS'

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    OfferCategory.OUTLET_ROPA: 'Ropa',
    OfferCategory.OUTLET_TECNO: 'Tecnología',
    OfferCategory.OUTLET_HOGAR: 'Hogar',
    OfferCategory.OUTLET_ZAPATOS: 'Zapatos',
    OfferCategory.OUTLET_BELLEZA: 'Belleza',
    OfferCategory.OTROS: 'Otros',
}
