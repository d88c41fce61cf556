"""
Fixed facts about the site owner, substituted into reply templates.
"""

from typing import Dict, List, Optional


ASSISTANT_NAME = "SobremIA"

PROFILE: Dict[str, object] = {
    "nombre": "Eduardo",
    "profesion": "ingeniero en informática",
    "universidad": "Santo Tomás Arica",
    "titulo": "Ingeniería en Informática",
    "periodo_estudios": "2018-2023",
    "tesis": "una aplicación de hábitos de estudio en React Native, calificada con 6,9",
    "inicio": "2016, en el liceo Antonio Varas de la Barra",
    "intereses": "desarrollo web moderno y minimalista",
    "contacto": "rojoserranoe@gmail.com",
    "edad": 25,
    "ciudad": "Arica",
    "pais": "Chile",
}

SKILLS: List[str] = [
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "SQL", "PHP",
    "C++", "C#", "Blazor", "React Native", "Figma", "Fresh", "Deno",
    "ASP.NET", "Laravel", "Bootstrap", "Tailwind CSS", "T-SQL",
    "Microsoft SQL Server", "Git", "GitHub", "Google Workspace",
]

FRONTEND_SKILLS = ("JavaScript", "TypeScript", "React", "Figma", "Fresh", "Tailwind CSS")
BACKEND_SKILLS = ("Node.js", "Python", "SQL", "PHP", "Deno", "C#", "Laravel")

PROJECTS: List[str] = [
    "tiendas e-commerce",
    "aplicaciones móviles con React Native",
    "sitios web de portafolio como este",
    "paneles internos con Blazor y SQL Server",
]

FAVORITE_FOOD = ("naranja", "fideos con salsa")
MUSIC_GENRES = ("electrónica", "rock")
MUSIC_ARTISTS = (
    "Skrillex", "The Strokes", "Paramore", "Alice in Chains", "ANOTR",
    "Fox Stevenson", "Linkin Park",
)
PETS = ({"nombre": "Zoe", "tipo": "gata"}, {"nombre": "Naruto", "tipo": "gato"})
SERIES = ("Loki", "Breaking Bad", "Game of Thrones", "The Boys")
VIDEO_GAMES = (
    "Call of Duty", "League of Legends", "Osu", "Rocket League", "Marvel Rivals",
    "Elden Ring",
)

EXPERIENCES: List[Dict[str, str]] = [
    {
        "key": "hospital",
        "lugar": "Hospital Regional Dr. Juan Noé Crevani",
        "rol": "estudiante en prácticas",
        "periodo": "enero 2018 - abril 2018",
        "descripcion": "Diagnóstico, reparación y soporte a los equipos informáticos del hospital.",
        "aprendizaje": "soporte técnico en entornos críticos",
    },
    {
        "key": "istyle",
        "lugar": "iStyle Store",
        "rol": "especialista en soporte técnico",
        "periodo": "octubre 2019 - mayo 2022",
        "descripcion": (
            "Diagnóstico y reparación de equipos Apple, micro soldadura de componentes "
            "electrónicos y armado de PC a la medida."
        ),
        "aprendizaje": "diagnóstico y reparación de dispositivos de alta gama",
    },
    {
        "key": "waki",
        "lugar": "WAKI Labs",
        "rol": "estudiante en prácticas",
        "periodo": "septiembre 2022 - diciembre 2022",
        "descripcion": (
            "Gestión del desarrollo de software, diseño de interfaces con React y "
            "participación en proyectos Web3."
        ),
        "aprendizaje": "gestión de equipos y diseño de interfaces",
    },
    {
        "key": "second mind",
        "lugar": "Second Mind Chile",
        "rol": "CEO y desarrollador frontend",
        "periodo": "febrero 2023 - septiembre 2023",
        "descripcion": (
            "Ganadores del primer lugar de Mercado E 2023 en la categoría Innovación, "
            "con interfaces y soluciones integrales a medida."
        ),
        "aprendizaje": "emprendimiento y liderazgo tecnológico",
    },
    {
        "key": "leonardo",
        "lugar": "Colegio Leonardo Da Vinci",
        "rol": "encargado de enlaces y soporte tecnológico",
        "periodo": "marzo 2023 - julio 2024",
        "descripcion": (
            "Administración de la plataforma educativa, libro digital e implementación "
            "de Lirmi Familia, además del apoyo a profesores."
        ),
        "aprendizaje": "gestión de tecnología educativa",
    },
    {
        "key": "tisa",
        "lugar": "The International School Arica (TISA)",
        "rol": "especialista en TI y coordinador de enlaces",
        "periodo": "septiembre 2024",
        "descripcion": (
            "Diseño de un plan integral para fortalecer la infraestructura tecnológica "
            "del colegio y estandarizar sus procesos."
        ),
        "aprendizaje": "planificación de infraestructura tecnológica",
    },
    {
        "key": "ancestral",
        "lugar": "Ancestral Technologies / UltraCropCare",
        "rol": "desarrollador de software",
        "periodo": "septiembre 2024 - actualidad",
        "descripcion": (
            "Desarrollo de soluciones con C#, PHP, Blazor, SQL, Laravel, ASP.NET, "
            "Figma, Bootstrap, Tailwind CSS y Microsoft SQL Server."
        ),
        "aprendizaje": "desarrollo de software empresarial",
    },
]

# normalized keyword -> experience key
EXPERIENCE_ALIASES: Dict[str, str] = {
    "hospital": "hospital",
    "juan noe": "hospital",
    "istyle": "istyle",
    "apple": "istyle",
    "waki": "waki",
    "second mind": "second mind",
    "mercado e": "second mind",
    "leonardo": "leonardo",
    "da vinci": "leonardo",
    "tisa": "tisa",
    "international school": "tisa",
    "ancestral": "ancestral",
    "ultracrop": "ancestral",
    "ultracropcare": "ancestral",
}


def get_experience(key: str) -> Optional[Dict[str, str]]:
    for exp in EXPERIENCES:
        if exp["key"] == key:
            return exp
    return None


def current_experience() -> Dict[str, str]:
    return EXPERIENCES[-1]


def find_experience_in(normalized: str) -> Optional[Dict[str, str]]:
    """Return the experience whose alias appears first in *normalized*."""
    best: Optional[tuple[int, str]] = None
    for alias, key in EXPERIENCE_ALIASES.items():
        idx = normalized.find(alias)
        if idx >= 0 and (best is None or idx < best[0]):
            best = (idx, key)
    return get_experience(best[1]) if best else None


def facts() -> Dict[str, object]:
    """Template substitution values shared by every reply generator."""
    return {
        **PROFILE,
        "asistente": ASSISTANT_NAME,
        "actual": current_experience()["lugar"],
    }
