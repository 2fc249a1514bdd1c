# -*- coding: utf-8 -*-
"""
Media Step - Step 2 of Listing Wizard.

Two independent image collections: main images (required, up to 5) and
detail images (optional, up to 8).
"""

from models.listing import MediaSlotName
from services.wizard.step_validator import StepValidator
from ui.components.image_uploader import ImageUploader
from ui.wizards.framework import BaseStep


class MediaStep(BaseStep):
    """Step 2: product images."""

    STEP_INDEX = StepValidator.STEP_MEDIA
    REQUIRED = True

    def setup_ui(self):
        self.primary_uploader = ImageUploader(
            self.controller, MediaSlotName.PRIMARY, "Main Images", required=True
        )
        self.main_layout.addWidget(self.primary_uploader)

        self.secondary_uploader = ImageUploader(
            self.controller, MediaSlotName.SECONDARY, "Detail Images"
        )
        self.main_layout.addWidget(self.secondary_uploader)
        self.main_layout.addStretch()
