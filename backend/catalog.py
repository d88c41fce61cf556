"""The ordered rule catalog: one ResponseRule per conversational topic.

Templates are plain ``str.format`` strings over ``TEMPLATE_VALUES``. A single
template must never contain a blank line: the composer uses "\\n\\n" to
separate independent chat bubbles.
"""

import re
from typing import Optional

from intent import ResponseRule, TopicTag, pattern_predicate, template_generator
from profile_data import (
    BACKEND_SKILLS,
    EXPERIENCES,
    FAVORITE_FOOD,
    FRONTEND_SKILLS,
    MUSIC_ARTISTS,
    MUSIC_GENRES,
    PETS,
    PROJECTS,
    SERIES,
    SKILLS,
    VIDEO_GAMES,
    facts,
    find_experience_in,
)
from random_source import RandomSource


def _join(items) -> str:
    items = list(items)
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + " y " + items[-1]


TEMPLATE_VALUES = {
    **facts(),
    "skills_top": _join(SKILLS[:5]),
    "frontend": _join(FRONTEND_SKILLS[:3]),
    "backend": _join(BACKEND_SKILLS[:3]),
    "proyectos": _join(PROJECTS),
    "proyecto_destacado": PROJECTS[1],
    "comidas": _join(FAVORITE_FOOD),
    "generos": _join(MUSIC_GENRES),
    "artistas": _join(MUSIC_ARTISTS[:4]),
    "mascotas": _join(f"{p['nombre']} ({p['tipo']})" for p in PETS),
    "series": _join(SERIES),
    "juegos": _join(VIDEO_GAMES[:4]),
    "empresas": _join(e["lugar"] for e in EXPERIENCES[-4:]),
}


GREETING_TEMPLATES = (
    "¡Hola! Soy {asistente}, un asistente virtual entrenado con información sobre {nombre}. ¿En qué puedo ayudarte hoy? 🚀",
    "¡Hola! Me alegra que estés aquí. Soy un asistente que conoce a {nombre}, {profesion}. Pregúntame lo que quieras.",
    "¡Hey! Bienvenido. Soy la IA que conoce todo sobre {nombre}: su carrera, sus tecnologías y lo que ha construido. 😊",
    "¡Saludos! Soy {asistente}, una IA conversacional especializada en {nombre}. ¿En qué puedo ayudarte?",
)

HOW_ARE_YOU_TEMPLATES = (
    "¡Muy bien, gracias por preguntar! Estoy lista para contarte lo que quieras sobre {nombre}.",
    "Todo en orden por aquí, funcionando al cien. ¿Y tú cómo estás? Si quieres, te cuento algo de {nombre}.",
    "Estoy de maravilla, siempre es un buen día para conversar. ¿Qué te trae por el portafolio de {nombre}?",
)

ABOUT_SUBJECT_TEMPLATES = (
    "{nombre} es {profesion} titulado en {universidad} ({periodo_estudios}). Se especializa en {intereses} y hoy trabaja en {actual}. ¿Te gustaría conocer algo específico de su trayectoria?",
    "{nombre} es un desarrollador de {edad} años de {ciudad}, {pais}. Comenzó en la tecnología en {inicio} y se enfoca en {intereses}. ¿Quieres que profundice en algún aspecto?",
    "{nombre} es {profesion} con experiencia en desarrollo web y aplicaciones móviles, cómodo con {skills_top}. ¿Te interesa saber más sobre su experiencia profesional?",
)

SKILLS_TEMPLATES = (
    "{nombre} domina varias tecnologías, entre las que destacan {skills_top}. Para frontend prefiere {frontend} y para backend se apoya en {backend}. ¿Te interesa conocer alguna tecnología en particular?",
    "Las habilidades técnicas de {nombre} abarcan {skills_top}, entre otras. Su stack le permite cubrir tanto la interfaz como el servidor. ¿Te gustaría saber qué opina de alguna herramienta?",
    "El stack de {nombre} combina {frontend} en el frontend con {backend} en el backend, además de Git y Figma como herramientas de todos los días.",
)

LANGUAGES_OPINION_TEMPLATES = (
    "Si hablamos de lenguajes de programación, el fuerte de {nombre} es JavaScript junto a TypeScript, que usa a diario. También se defiende muy bien con C#, PHP y Python.",
    "El lenguaje favorito de {nombre} es TypeScript: valora el tipado y lo cómodo que resulta mantener el código. ¿Te gustaría saber qué opina de otro lenguaje?",
    "{nombre} se siente más cómodo con JavaScript y TypeScript, aunque en su día a día actual escribe bastante C# con Blazor y T-SQL. ¿Quieres conocer su opinión sobre alguna tecnología?",
)

TRAJECTORY_TEMPLATES = (
    "{nombre} comenzó en la tecnología en {inicio}. Desde entonces ha pasado por lugares como {empresas}, y hoy se desempeña en {actual}. ¿Te gustaría saber más sobre alguna de estas empresas?",
    "La trayectoria de {nombre} incluye soporte técnico, educación y desarrollo de software. Pasó por {empresas} antes de llegar a su puesto actual en {actual}. ¿Quieres que te cuente de alguna experiencia en particular?",
    "Profesionalmente, {nombre} ha trabajado en {empresas}. Cada etapa le dejó algo distinto, desde el soporte en terreno hasta el desarrollo empresarial. ¿Te interesa conocer más detalles de alguna?",
)

EXPERIENCE_DETAIL_TEMPLATES = (
    "En {lugar}, {nombre} se desempeñó como {rol} ({periodo}). {descripcion} Allí fortaleció su {aprendizaje}.",
    "Durante {periodo}, {nombre} trabajó en {lugar} como {rol}. {descripcion}",
    "Su paso por {lugar} como {rol} ({periodo}) le dejó experiencia en {aprendizaje}. {descripcion} ¿Te gustaría conocer otra de sus experiencias?",
)

EDUCATION_TEMPLATES = (
    "{nombre} estudió {titulo} en {universidad} entre {periodo_estudios}. ¿Te gustaría saber más sobre su tesis?",
    "Su formación es de {profesion}, titulado en {universidad}. Desde el liceo ya mostraba interés por la informática. ¿Quieres conocer el tema de su tesis?",
    "{nombre} se formó como {profesion} en {universidad} ({periodo_estudios}), donde se destacó en desarrollo de software.",
)

THESIS_TEMPLATES = (
    "La tesis de {nombre} fue {tesis}. Combinó su interés por el diseño con la programación móvil.",
    "Para titularse, {nombre} creó {tesis}. Fue una buena oportunidad para aplicar React Native de punta a punta.",
    "{nombre} presentó como tesis {tesis}. La idea era ayudar a otros estudiantes a organizar mejor su tiempo.",
)

PROJECTS_TEMPLATES = (
    "{nombre} ha desarrollado distintos proyectos: {proyectos}. ¿Te gustaría conocer alguno en detalle?",
    "Entre sus proyectos destacan {proyecto_destacado} y varios sitios web modernos. ¿Quieres saber qué tecnologías usó en cada proyecto?",
    "Los proyectos de {nombre} van desde tiendas e-commerce hasta apps móviles. Este mismo sitio es uno de ellos. ¿Te interesa conocer cómo lo construyó?",
)

TECH_GENERIC_TEMPLATES = (
    "{nombre} se mueve con comodidad en {skills_top}. Le gusta elegir la herramienta según el problema y no al revés.",
    "En tecnologías, el día a día de {nombre} combina {frontend} en el frontend con {backend} en el backend.",
)

TECH_UNKNOWN_TEMPLATES = (
    "No tengo registro de que {nombre} use {tech} de forma habitual, aunque con su base en {skills_top} podría aprenderlo rápido.",
    "{tech} no está entre las herramientas principales de {nombre}, pero siempre le interesa probar tecnologías nuevas.",
)

TECH_OPINIONS = {
    "javascript": (
        "{nombre} usa JavaScript tanto en frontend como en backend. Lo considera la base de su stack.",
        "JavaScript es una de las tecnologías core de {nombre}; lo combina con frameworks modernos casi siempre.",
    ),
    "typescript": (
        "TypeScript es una de las herramientas preferidas de {nombre}. Aprecia cómo el sistema de tipos previene errores.",
        "{nombre} adoptó TypeScript en casi todo lo que construye por la seguridad de tipos que ofrece.",
    ),
    "react": (
        "React es el framework frontend preferido de {nombre}. Se siente muy cómodo con sus patrones y su ecosistema.",
        "{nombre} usa React con frecuencia para la web, y React Native cuando se trata de apps móviles.",
    ),
    "react native": (
        "{nombre} usó React Native para su tesis y le parece una gran opción para llegar a Android e iOS con un solo código.",
    ),
    "node.js": (
        "Node.js es la opción de {nombre} cuando necesita un backend rápido en JavaScript.",
    ),
    "python": (
        "{nombre} usa Python para scripts, automatizaciones y análisis de datos. Valora lo legible que es.",
    ),
    "php": (
        "{nombre} trabaja con PHP y Laravel en su puesto actual; le gusta lo productivo que es Laravel.",
    ),
    "laravel": (
        "Laravel es parte del día a día de {nombre}. Le gusta su ORM y lo rápido que permite armar APIs.",
    ),
    "sql": (
        "{nombre} maneja SQL con soltura, en especial T-SQL sobre Microsoft SQL Server.",
    ),
    "c#": (
        "C# es el lenguaje principal de {nombre} en {actual}, junto a Blazor y ASP.NET.",
    ),
    "blazor": (
        "{nombre} construye interfaces internas con Blazor; le parece una alternativa interesante para equipos .NET.",
    ),
    "deno": (
        "A {nombre} le gusta Deno por su seguridad por defecto y su soporte nativo de TypeScript. Este sitio corre sobre Deno.",
    ),
    "fresh": (
        "Fresh es el framework con el que {nombre} construyó este sitio. Le gustan sus islas y lo liviano que resulta.",
    ),
    "tailwind": (
        "{nombre} diseña con Tailwind CSS porque le permite iterar rápido sin salir del marcado.",
    ),
    "figma": (
        "{nombre} usa Figma para prototipar antes de escribir código.",
    ),
    "c++": (
        "{nombre} aprendió C++ en la universidad; hoy lo usa poco, pero le dio una buena base en algoritmos.",
    ),
}

# normalized keyword -> key in TECH_OPINIONS (or display name for unknown ones)
TECH_ALIASES = {
    "node": "node.js",
    "nodejs": "node.js",
    "node.js": "node.js",
    "tailwind css": "tailwind",
    "js": "javascript",
}

TECH_KEYWORD_PATTERN = (
    r"javascript|typescript|react native|react|node\.js|nodejs|node|python|php|laravel|sql|"
    r"c#|c\+\+|blazor|deno|fresh|tailwind(?: css)?|figma|angular|vue|svelte|next\.?js|"
    r"django|flask|ruby|rails|java|kotlin|swift|rust|flutter|mongodb|mysql|postgresql"
)
_TECH_RE = re.compile(rf"(?<!\w)({TECH_KEYWORD_PATTERN})(?!\w)")

LANGUAGE_SKILL_TEMPLATES = (
    "{nombre} habla español como lengua materna y tiene un nivel intermedio de inglés, suficiente para leer documentación técnica sin problemas.",
    "Además del español, {nombre} se maneja en inglés técnico: documentación, foros y cursos en línea no son problema.",
)

CONTACT_TEMPLATES = (
    "Puedes escribirle a {nombre} a {contacto}. También lo encuentras en LinkedIn y GitHub.",
    "La forma más directa de contactar a {nombre} es por correo: {contacto}.",
)

AVAILABILITY_TEMPLATES = (
    "{nombre} considera nuevas oportunidades que se alineen con sus objetivos. Para conversar condiciones, lo mejor es escribirle a {contacto}.",
    "Si tienes una propuesta o colaboración en mente, {nombre} estará feliz de leerla en {contacto}.",
)

HOBBIES_TEMPLATES = (
    "En su tiempo libre, a {nombre} le gusta escuchar música, jugar videojuegos y ver series. También disfruta explorar tecnologías nuevas por curiosidad.",
    "Fuera del código, {nombre} se entretiene con videojuegos como {juegos} y con series como {series}.",
)

MUSIC_TEMPLATES = (
    "A {nombre} le gusta la música {generos}. Entre sus artistas favoritos están {artistas}.",
    "La playlist de {nombre} mezcla {generos}: desde {artistas} hasta lo que aparezca en el momento. 🎧",
)

GAMES_TEMPLATES = (
    "{nombre} es bastante gamer. Sus favoritos incluyen {juegos}. 🎮",
    "Cuando tiene tiempo, {nombre} juega {juegos}. Le gustan tanto los competitivos como los de mundo abierto.",
)

SERIES_TEMPLATES = (
    "Entre las series favoritas de {nombre} están {series}.",
    "{nombre} disfruta series como {series}, y de vez en cuando algo de anime.",
)

PETS_TEMPLATES = (
    "{nombre} tiene dos mascotas: {mascotas}. 🐱",
    "En casa de {nombre} mandan {mascotas}. Son parte fundamental del equipo. 🐾",
)

FOOD_TEMPLATES = (
    "La fruta favorita de {nombre} es la naranja y su plato favorito son los fideos con salsa. 🍊🍝",
    "Si le preguntas por comida, {nombre} te dirá sin dudar: {comidas}.",
)

AGE_TEMPLATES = (
    "{nombre} tiene {edad} años.",
    "{nombre} tiene {edad} años, aunque lleva en la tecnología desde {inicio}.",
)

LOCATION_TEMPLATES = (
    "{nombre} vive en {ciudad}, {pais}, la ciudad de la eterna primavera. ☀️",
    "{nombre} es de {ciudad}, en el norte de {pais}.",
)

JOKE_TEMPLATES = (
    "¿Por qué los desarrolladores prefieren el frío? Porque odian los bugs. 🐛❄️ ¿Te gustaría escuchar otro?",
    "¿Cómo sabe un programador que su código no funcionará? Lo acaba de escribir. 😂 ¿Te gustaría escuchar otro?",
    "¿Cuál es la comida favorita de un desarrollador JavaScript? ¡Las cookies! 🍪 ¿Te gustaría escuchar otro?",
    "¿Cuántos programadores se necesitan para cambiar una bombilla? Ninguno, es un problema de hardware. 💡 ¿Te gustaría escuchar otro?",
    "Un QA entra a un bar, pide una cerveza, pide 0 cervezas, pide -1 cerveza, pide una lagartija... 🍺 ¿Te gustaría escuchar otro?",
)

HOW_AI_WORKS_TEMPLATES = (
    "Soy {asistente}, un asistente basado en reglas creado por {nombre}. Reconozco patrones en tu mensaje y elijo respuestas desde plantillas, sin modelos de lenguaje.",
    "No soy un modelo de lenguaje como GPT: funciono con reconocimiento de patrones y plantillas que {nombre} escribió a mano, más una pequeña memoria de contexto.",
)

ABOUT_SITE_TEMPLATES = (
    "Este sitio fue construido por {nombre} usando Fresh sobre Deno y TypeScript, con Tailwind CSS para el diseño.",
    "El portafolio usa Fresh, Deno y Tailwind CSS. El chat que estás usando es una implementación propia de {nombre}.",
)

COMPLIMENT_TEMPLATES = (
    "¡Gracias! Se lo haré saber a {nombre}, seguro le alegrará. 😊",
    "¡Qué bien que te guste! {nombre} puso mucho cariño en este sitio.",
)

THANKS_TEMPLATES = (
    "¡De nada! Si quieres saber algo más sobre {nombre}, aquí estaré.",
    "Un placer ayudarte. ¿Algo más que quieras preguntar?",
)

GOODBYE_TEMPLATES = (
    "¡Hasta pronto! Gracias por visitar el portafolio de {nombre}. 👋",
    "¡Chao! Vuelve cuando quieras.",
)

COMPLAINT_TEMPLATES = (
    "Lo siento si no fui de ayuda. Intenta preguntarme de otra forma sobre {nombre} y haré lo posible.",
    "Lamento la confusión. Mi conocimiento se limita al perfil de {nombre}; quizás pueda ayudarte mejor con una pregunta más específica.",
)

CORRECTION_TEMPLATES = (
    "Perdón si me equivoqué. Si tienes la información correcta, puedes escribirle a {nombre} a {contacto} para que la actualice.",
    "Gracias por avisar. Mi información proviene de lo que {nombre} me enseñó, así que podría estar desactualizada.",
)

CHANGE_TOPIC_TEMPLATES = (
    "Claro, podemos cambiar de tema. Ten en cuenta que mi especialidad es {nombre}, pero intentaré mantener una conversación agradable.",
    "No hay problema. Puedo hablarte de su música, sus mascotas, sus series o lo que se te ocurra sobre {nombre}.",
)

CHILEAN_SLANG_TEMPLATES = (
    "¡Jajaja, se nota lo chileno! 🇨🇱 {nombre} también es de {ciudad}, así que seguro te entendería al tiro.",
    "¡Bacán que hables así! Aquí intento mantener un tono más formal, pero {nombre} lo encontraría la raja.",
)


def _experience_detail(normalized: str, rng: RandomSource) -> str:
    exp = find_experience_in(normalized or "") or rng.choice(EXPERIENCES)
    template = rng.choice(EXPERIENCE_DETAIL_TEMPLATES)
    return template.format(**TEMPLATE_VALUES, **{k: v for k, v in exp.items() if k != "key"})


def first_tech_keyword(normalized: str) -> Optional[str]:
    m = _TECH_RE.search(normalized or "")
    if not m:
        return None
    kw = m.group(1)
    return TECH_ALIASES.get(kw, kw)


def _tech_opinion(normalized: str, rng: RandomSource) -> str:
    kw = first_tech_keyword(normalized)
    if kw is None:
        return rng.choice(TECH_GENERIC_TEMPLATES).format(**TEMPLATE_VALUES)
    opinions = TECH_OPINIONS.get(kw)
    if opinions:
        return rng.choice(opinions).format(**TEMPLATE_VALUES)
    return rng.choice(TECH_UNKNOWN_TEMPLATES).format(**TEMPLATE_VALUES, tech=kw.capitalize())


def _rule(name, templates, *patterns, exclude=(), topic=None) -> ResponseRule:
    return ResponseRule(
        name=name,
        predicate=pattern_predicate(*patterns, exclude=exclude),
        generate=template_generator(templates, TEMPLATE_VALUES),
        topic=topic,
    )


CATALOG: tuple[ResponseRule, ...] = (
    _rule(
        "saludo", GREETING_TEMPLATES,
        r"hola+", r"holi", r"hello", r"hi", r"hey", r"saludos", r"buenas(?: tardes| noches)?",
        r"buenos dias", r"wenas?", r"que onda", r"que hubo",
        r"que tal(?!\s+(?:estas|te va|andas))",
    ),
    _rule(
        "estado_asistente", HOW_ARE_YOU_TEMPLATES,
        r"como estas", r"como te va", r"que tal estas", r"que tal te va", r"como andas",
        r"todo bien", r"estas bien",
    ),
    _rule(
        "sobre_eduardo", ABOUT_SUBJECT_TEMPLATES,
        r"quien es eduardo", r"(?:sobre|acerca de|hablame de|cuentame de) eduardo",
        r"informacion general", r"perfil de eduardo",
    ),
    _rule(
        "habilidades", SKILLS_TEMPLATES,
        r"habilidades?", r"skills", r"competencias", r"stack", r"que sabes? hacer", r"herramientas",
        r"conocimientos tecnicos", r"tecnologias",
    ),
    _rule(
        "lenguajes_programacion", LANGUAGES_OPINION_TEMPLATES,
        r"lenguajes? de programacion", r"(?:que|cual|en que|con que) (?:lenguaje|stack)",
        r"lenguaje (?:favorito|preferido|principal)",
        r"(?:mas|mayor) experiencia(?!\s+(?:laboral|profesional))",
        topic=TopicTag.SKILLS,
    ),
    _rule(
        "experiencia_laboral", TRAJECTORY_TEMPLATES,
        r"trayectoria", r"experiencia (?:laboral|profesional)", r"historial laboral",
        r"donde (?:ha|has) trabajado", r"en que empresas?", r"empleos?", r"carrera profesional",
        r"cv", r"curriculum", r"(?:hablame|cuentame) (?:sobre|de) (?:tu |su )?experiencia",
        r"^\W*experiencia\W*$",
    ),
    ResponseRule(
        name="experiencia_detalle",
        predicate=pattern_predicate(
            r"hospital", r"juan noe", r"istyle", r"apple", r"waki", r"second mind", r"mercado e",
            r"leonardo", r"da vinci", r"tisa", r"international school", r"ancestral",
            r"ultracrop(?:care)?",
        ),
        generate=_experience_detail,
        topic=TopicTag.TRAJECTORY,
    ),
    _rule(
        "educacion", EDUCATION_TEMPLATES,
        r"educacion", r"estudi\w*", r"universidad", r"formacion(?: academica)?", r"titulo",
        r"carrera(?! profesional)", r"egres\w*", r"santo tomas",
    ),
    _rule(
        "tesis", THESIS_TEMPLATES,
        r"tesis", r"proyecto de (?:titulo|tesis)", r"trabajo de titulo", r"memoria de titulo",
        topic=TopicTag.EDUCATION,
    ),
    _rule(
        "proyectos", PROJECTS_TEMPLATES,
        r"proyectos?(?!\s+de\s+(?:tesis|titulo))", r"que ha (?:creado|construido|desarrollado)",
        r"(?:apps?|aplicaciones) que ha hecho",
    ),
    ResponseRule(
        name="tecnologias_generales",
        predicate=pattern_predicate(TECH_KEYWORD_PATTERN),
        generate=_tech_opinion,
        topic=TopicTag.SKILLS,
    ),
    _rule(
        "idiomas", LANGUAGE_SKILL_TEMPLATES,
        r"ingles", r"english", r"idiomas?", r"habla (?:otros )?idiomas",
    ),
    _rule(
        "contacto", CONTACT_TEMPLATES,
        r"contacto", r"contactar\w*", r"email", r"correo", r"linkedin", r"github", r"escribirle",
    ),
    _rule(
        "disponibilidad", AVAILABILITY_TEMPLATES,
        r"disponib\w*", r"contratar\w*", r"contratacion", r"oferta (?:de trabajo|laboral)",
        r"freelance", r"vacantes?", r"colaboracion",
    ),
    _rule(
        "hobbies", HOBBIES_TEMPLATES,
        r"hobbies?", r"pasatiempos?", r"tiempo libre", r"que le gusta hacer", r"intereses personales",
    ),
    _rule(
        "musica", MUSIC_TEMPLATES,
        r"musica", r"canciones?", r"bandas?", r"artistas?", r"escucha",
    ),
    _rule(
        "videojuegos", GAMES_TEMPLATES,
        r"videojuegos?", r"juegos?", r"gamer", r"juega", r"league of legends", r"elden ring", r"osu",
    ),
    _rule(
        "series_anime", SERIES_TEMPLATES,
        r"series?", r"anime", r"peliculas?", r"netflix",
    ),
    _rule(
        "mascotas", PETS_TEMPLATES,
        r"mascotas?", r"gat[oa]s?", r"perr[oa]s?", r"zoe",
    ),
    _rule(
        "comida", FOOD_TEMPLATES,
        r"comida", r"comer", r"plato favorito", r"fruta", r"fideos",
    ),
    _rule(
        "edad", AGE_TEMPLATES,
        r"edad", r"cuantos anos", r"anos tiene",
    ),
    _rule(
        "ubicacion", LOCATION_TEMPLATES,
        r"donde vive", r"de donde es", r"ubicacion", r"ciudad", r"arica", r"chile", r"pais",
    ),
    _rule(
        "chistes", JOKE_TEMPLATES,
        r"chistes?", r"bromas?", r"algo gracioso", r"hazme reir", r"cuentame algo divertido",
    ),
    _rule(
        "funcionamiento_ia", HOW_AI_WORKS_TEMPLATES,
        r"como funcionas", r"eres (?:una |un )?(?:ia|inteligencia artificial|bot|robot)", r"que eres",
        r"quien eres", r"como te (?:hicieron|crearon|programaron)", r"chatgpt", r"gpt", r"openai",
        r"sobremia",
    ),
    _rule(
        "sobre_sitio_web", ABOUT_SITE_TEMPLATES,
        r"(?:este|el) (?:sitio|portafolio)", r"sitio web", r"pagina web", r"esta pagina",
        r"con que (?:esta|fue) (?:hecho|hecha|construido|construida|creado|creada)",
    ),
    _rule(
        "cumplidos", COMPLIMENT_TEMPLATES,
        r"eres (?:genial|increible|inteligente|buena|util|lo maximo)",
        r"me (?:gusta|encanta) (?:tu|el|este) (?:sitio|pagina|portafolio|chat|diseno)",
        r"buen trabajo", r"excelente", r"impresionante",
    ),
    _rule(
        "agradecimiento", THANKS_TEMPLATES,
        r"gracias", r"te agradezco", r"thanks", r"thank you",
    ),
    _rule(
        "despedida", GOODBYE_TEMPLATES,
        r"adios", r"chao", r"chau", r"hasta luego", r"hasta pronto", r"nos vemos", r"bye", r"me voy",
    ),
    _rule(
        "quejas", COMPLAINT_TEMPLATES,
        r"no sirves", r"no entiendes", r"pesim[oa]", r"inutil", r"horrible", r"aburrid[oa]",
        r"no funciona", r"respuesta (?:mala|rara)", r"no me ayudas",
    ),
    _rule(
        "correccion", CORRECTION_TEMPLATES,
        r"eso no es (?:cierto|correcto|verdad)", r"te equivocas", r"estas equivocad[oa]",
        r"incorrecto", r"no es asi",
    ),
    _rule(
        "conversacion_general", CHANGE_TOPIC_TEMPLATES,
        r"cambiemos de tema", r"hablemos de otra cosa", r"otro tema", r"hablemos de ti",
        r"de que (?:mas )?(?:podemos|puedo) hablar", r"en que me puedes ayudar",
    ),
    _rule(
        "modismos_chilenos", CHILEAN_SLANG_TEMPLATES,
        r"bacan", r"bkn", r"cachai", r"la raja", r"al tiro", r"fome", r"filete", r"pulento",
    ),
)
