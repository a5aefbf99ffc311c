from hyphae.utilities.env.parsing import _env_flag, _env_optional_int


class SystemConfiguration:
    @classmethod
    def dev_mode(cls) -> bool:
        return _env_flag("HYPHAE_DEV_MODE")

    @classmethod
    def seed(cls) -> int | None:
        return _env_optional_int("HYPHAE_SEED")
