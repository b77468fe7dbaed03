from lispy.builtin.env_builtin import register, standard_env

__all__ = ["register", "standard_env"]
