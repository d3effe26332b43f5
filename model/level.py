from math import isqrt


def current_level(experience: int) -> int:
    """
    Nivel alcanzado con la experiencia dada. La raiz se trunca antes de dividir,
    no se redondea.
    """
    return (isqrt(2500 + 200 * experience) - 50) // 100


def experience_until_next_level(experience: int, level: int) -> int:
    # level tiene que venir de current_level(experience)
    return 50 * (level + 1) * (level + 2) - experience
