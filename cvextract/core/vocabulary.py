"""
Static vocabulary tables used by the extraction pipeline.

All tables are immutable. Parsers receive them as default arguments so each
table can be swapped out in isolation (tests, other locales).
"""

# ===== SECTION HEADERS =====
# Compared against the whole normalized line, never a substring of prose.

EDUCATION_HEADERS = frozenset({
    "education",
    "academic background",
    "academic qualifications",
    "educational qualifications",
    "education & training",
    "education and training",
    "qualifications",
})

WORK_HEADERS = frozenset({
    "work experience",
    "work experiences",
    "employment",
    "employment history",
    "experience",
    "professional experience",
    "work history",
    "projects",
    "project",
    "personal projects",
    "academic projects",
})

# Subset of WORK_HEADERS that opens a project list rather than employment
PROJECT_HEADERS = frozenset({
    "projects",
    "project",
    "personal projects",
    "academic projects",
})

SKILLS_HEADERS = frozenset({
    "technical skills",
    "skills",
    "technologies",
    "technologies used",
    "core skills",
    "key skills",
    "skills & tools",
})

PERSONAL_HEADERS = frozenset({
    "personal information",
    "personal details",
    "personal info",
    "contact",
    "contact details",
    "contact information",
})

# Terminator-only headers: they close the current section and open an "other" one
OTHER_HEADERS = frozenset({
    "summary",
    "profile",
    "professional summary",
    "objective",
    "career objective",
    "references",
    "referees",
    "certifications",
    "certificates",
    "languages",
    "interests",
    "hobbies",
    "awards",
    "achievements",
    "publications",
    "volunteering",
    "volunteer experience",
    "extracurricular activities",
    "declaration",
})

# ===== NAME =====

NAME_NOISE_WORDS = frozenset({"curriculum", "resume", "cv", "profile", "contact"})

# "eng." only with its period; "Eng" alone is a given name
HONORIFICS = frozenset({"dr", "prof", "mr", "mrs", "ms", "miss", "eng."})

# ===== EDUCATION =====

# Pre-degree (secondary level) certificates. Checked before DEGREE_TERMS.
QUALIFICATION_TERMS = (
    "g.c.e",
    "gce",
    "o/l",
    "a/l",
    "ordinary level",
    "advanced level",
    "o level",
    "a level",
    "o-level",
    "a-level",
    "gcse",
    "igcse",
    "ssc",
    "hsc",
    "high school diploma",
    "matriculation",
)

DEGREE_TERMS = (
    "bachelor",
    "bachelors",
    "bachelor's",
    "master",
    "masters",
    "master's",
    "doctor of philosophy",
    "doctorate",
    "doctoral",
    "phd",
    "ph.d",
    "bsc",
    "b.sc",
    "msc",
    "m.sc",
    "ba",
    "b.a",
    "ma",
    "m.a",
    "mba",
    "m.b.a",
    "beng",
    "b.eng",
    "meng",
    "m.eng",
    "btech",
    "b.tech",
    "mtech",
    "m.tech",
    "bba",
    "llb",
    "mphil",
    "degree",
    "diploma",
    "higher national diploma",
    "hnd",
    "associate degree",
    "postgraduate",
    "undergraduate",
    "certificate",
    "certification",
)

INSTITUTION_TERMS = (
    "university",
    "college",
    "institute",
    "institution",
    "school",
    "academy",
    "polytechnic",
    "campus",
    "faculty",
)

# Secondary schools are never the institution of a degree entry
SECONDARY_SCHOOL_TERMS = (
    "high school",
    "secondary school",
    "prep school",
    "grammar school",
    "primary school",
    "junior school",
)

# Ordered: first category whose keywords match the first degree wins
EDUCATION_LEVELS = (
    ("PhD", ("phd", "ph.d", "doctor of philosophy", "doctorate", "doctoral")),
    ("Masters", ("master", "masters", "master's", "msc", "m.sc", "ma", "m.a", "mba", "m.b.a",
                 "meng", "m.eng", "mphil", "mtech", "m.tech")),
    ("Bachelors", ("bachelor", "bachelors", "bachelor's", "bsc", "b.sc", "ba", "b.a", "beng",
                   "b.eng", "btech", "b.tech", "bba", "llb")),
    ("Diploma", ("diploma", "associate", "hnd")),
    ("Certificate", ("certificate", "certification")),
)

# ===== WORK EXPERIENCE =====

COMPANY_SUFFIXES = (
    "ltd",
    "ltd.",
    "limited",
    "llc",
    "inc",
    "inc.",
    "pvt",
    "(pvt)",
    "plc",
    "corp",
    "corp.",
    "corporation",
    "gmbh",
    "co.",
    "llp",
)

JOB_TITLE_TERMS = (
    "engineer",
    "developer",
    "intern",
    "manager",
    "analyst",
    "consultant",
    "designer",
    "architect",
    "administrator",
    "lead",
    "officer",
    "executive",
    "assistant",
    "coordinator",
    "specialist",
    "trainee",
)

# Responsibility bullets in CVs almost always open with one of these
IMPERATIVE_VERBS = frozenset({
    "developed", "designed", "implemented", "built", "created", "led", "managed",
    "worked", "collaborated", "maintained", "improved", "optimized", "optimised",
    "integrated", "deployed", "tested", "wrote", "conducted", "assisted", "coordinated",
    "analyzed", "analysed", "responsible", "delivered", "automated", "supported",
    "participated", "prepared", "handled", "achieved", "develop", "design", "implement",
    "build", "create", "manage", "maintain", "collaborate", "assist",
})

OPEN_ENDED_TERMS = ("present", "current", "currently", "ongoing", "now", "to date", "till date")

# ===== SKILLS =====
# Display form is the canonical rendering; lower-case entries are title-cased on output.

SKILL_VOCABULARY = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "PHP", "Ruby", "Kotlin",
    "Swift", "Golang", "Rust", "Scala", "Dart", "MATLAB", "Perl", "Bash", "PowerShell",
    "HTML", "CSS", "SASS", "SQL", "NoSQL", "GraphQL",
    # Frontend
    "React", "React Native", "Angular", "Vue.js", "Next.js", "Nuxt.js", "Svelte", "Redux",
    "jQuery", "Bootstrap", "Tailwind CSS", "Material UI", "Flutter",
    # Backend
    "Node.js", "Express", "Django", "Flask", "FastAPI", "Spring Boot", "Spring", "Laravel",
    ".NET", "ASP.NET", "Ruby on Rails", "NestJS", "Socket.io",
    # Data
    "MongoDB", "PostgreSQL", "MySQL", "SQLite", "Redis", "Firebase", "Oracle", "Elasticsearch",
    "Cassandra", "DynamoDB", "Pandas", "NumPy", "TensorFlow", "PyTorch", "Keras",
    "Scikit-learn", "Machine Learning", "Deep Learning", "Data Analysis", "Power BI", "Tableau",
    # Cloud / DevOps
    "AWS", "Azure", "Google Cloud", "GCP", "Docker", "Kubernetes", "Terraform", "Jenkins",
    "CI/CD", "Git", "GitHub", "GitLab", "Bitbucket", "Linux", "Nginx", "Heroku", "Vercel",
    # Practices / tools
    "REST", "REST API", "Microservices", "Agile", "Scrum", "JIRA", "Figma", "Postman",
    "Selenium", "Jest", "Unit Testing", "OOP", "Android", "iOS",
    # Soft skills
    "leadership", "communication", "teamwork", "problem solving", "critical thinking",
    "time management", "project management", "adaptability", "creativity",
)

# ===== LINKS =====

GITHUB_DOMAINS = ("github.com",)
LINKEDIN_DOMAINS = ("linkedin.com",)

PORTFOLIO_DOMAINS = (
    "vercel.app",
    "netlify.app",
    "github.io",
    "gitlab.io",
    "behance.net",
    "dribbble.com",
    "wixsite.com",
    "squarespace.com",
    "wordpress.com",
    "webflow.io",
    "carrd.co",
    "about.me",
    "notion.site",
    "pages.dev",
)

# Short generic TLDs typically used for personal sites (janedoe.dev)
PERSONAL_SITE_TLDS = ("dev", "me", "io", "design", "site", "tech", "portfolio")

# ===== LOCATION =====

LOCATION_LINE_PREFIXES = (
    "location",
    "city",
    "country",
    "based in",
    "residing in",
    "lives in",
)

# Canonical casing; used to infer a country from institution names
COUNTRY_NAMES = (
    "Sri Lanka", "United Kingdom", "United States", "India", "Pakistan", "Bangladesh",
    "Nepal", "Maldives", "Australia", "New Zealand", "Canada", "Ireland", "Singapore",
    "Malaysia", "Germany", "France", "Netherlands", "Italy", "Spain", "Sweden", "Norway",
    "Denmark", "Finland", "Switzerland", "Japan", "China", "South Korea", "United Arab Emirates",
    "Qatar", "Saudi Arabia", "South Africa", "Nigeria", "Kenya", "England", "Scotland", "Wales",
)
