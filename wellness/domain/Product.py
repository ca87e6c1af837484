"""Product scan result for a barcode / QR code."""
from typing import Optional

from wellness.domain.ResponseModel import Scalar, ResponseModel
from wellness.utilities.constants import HEALTH_RATING_TONES


class ProductScan(ResponseModel):
    calories: Scalar = None
    processed_percent: Scalar = None
    health_rating: Optional[str] = None

    @property
    def tone(self) -> str:
        '''Display tone of the rating: good, moderate, or poor for anything else.'''
        return HEALTH_RATING_TONES.get(self.health_rating or "", "poor")
