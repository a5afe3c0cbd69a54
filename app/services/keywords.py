# app/services/keywords.py
import re

TECH_KEYWORDS = [
    'javascript', 'typescript', 'python', 'java', 'c++', 'c#', 'ruby', 'php',
    'go', 'rust', 'react', 'angular', 'vue', 'node', 'express', 'nestjs',
    'django', 'flask', 'spring', 'docker', 'kubernetes', 'aws', 'azure', 'gcp',
    'ci/cd', 'jenkins', 'gitlab', 'mongodb', 'postgresql', 'mysql', 'redis',
    'elasticsearch', 'git', 'agile', 'scrum', 'rest', 'graphql', 'microservices',
    'machine learning', 'ai', 'data science', 'tensorflow', 'pytorch', 'html',
    'css', 'sass', 'tailwind', 'bootstrap', 'sql', 'nosql', 'api', 'testing',
    'jest', 'mocha', 'cypress',
]

DEGREE_KEYWORDS = ['bachelor', 'master', 'phd', 'degree', 'diploma']

YEARS_PATTERN = re.compile(r'(\d+)\+?\s*years?', re.IGNORECASE)


def _contains_term(text: str, term: str) -> bool:
    # "go" must not match "good", "ai" must not match "maintain"
    pattern = r'(?<![a-z0-9])' + re.escape(term) + r'(?![a-z0-9])'
    return re.search(pattern, text) is not None


def extract_keywords(job_description: str) -> list:
    """Derive keywords from a job description, in first-found order."""
    if not job_description:
        return []

    lower_description = job_description.lower()
    found = []

    def add(keyword):
        if keyword not in found:
            found.append(keyword)

    for keyword in TECH_KEYWORDS:
        if _contains_term(lower_description, keyword):
            add(keyword)

    # Years of experience, e.g. "5+ years"
    for match in YEARS_PATTERN.finditer(job_description):
        add(match.group(0).lower())

    for keyword in DEGREE_KEYWORDS:
        if _contains_term(lower_description, keyword):
            add(keyword)

    return found
