from .gym_env import AtaxxEnv

__all__ = ["AtaxxEnv"]
