import os

from hypothesis import HealthCheck, settings

# Property tests run faster in CI; set HYPOTHESIS_PROFILE=thorough locally for more examples
settings.register_profile(
    "ci", max_examples=50, suppress_health_check=[HealthCheck.too_slow]
)
settings.register_profile("thorough", max_examples=500)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
