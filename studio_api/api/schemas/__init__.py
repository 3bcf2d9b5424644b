# Request and response models for the studio API.
