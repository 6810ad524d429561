"""Keyword catalogs used by the CV extractor. Order matters: it drives output order and tie-breaks."""

from typing import Tuple

SKILL_KEYWORDS: Tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "C++", "C#",
    "Ruby", "PHP", "Swift", "Kotlin", "Go", "Rust", "SQL", "MongoDB", "PostgreSQL",
    "Docker", "Kubernetes", "AWS", "Azure", "GCP", "Git", "Agile", "Scrum",
    "Marketing", "SEO", "SEM", "Sales", "CRM", "Content Writing", "Copywriting",
    "Data Analysis", "Excel", "PowerPoint", "Project Management", "Leadership",
    "Communication", "Problem Solving", "Team Collaboration", "HTML", "CSS",
    "Vue.js", "Angular", "Django", "Flask", "Spring", "Laravel", "Rails",
    "Machine Learning", "AI", "Deep Learning", "TensorFlow", "PyTorch",
    "GraphQL", "REST API", "Microservices", "CI/CD", "DevOps", "Linux",
    "Figma", "Adobe XD", "Photoshop", "Illustrator", "UI/UX", "Design",
    "Financial Analysis", "Accounting", "Budgeting", "Forecasting",
    "Customer Service", "Technical Support", "Troubleshooting",
)

# (category, keywords) pairs; the first category wins a tie
EXPERTISE_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Software Engineering", ("JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "C++", "HTML", "CSS")),
    ("Data Science", ("Python", "Machine Learning", "AI", "TensorFlow", "PyTorch", "Data Analysis")),
    ("DevOps", ("Docker", "Kubernetes", "AWS", "Azure", "CI/CD", "Linux")),
    ("Marketing", ("Marketing", "SEO", "SEM", "Content Writing", "Copywriting")),
    ("Sales", ("Sales", "CRM", "Customer Service")),
    ("Design", ("Figma", "Adobe XD", "Photoshop", "UI/UX", "Design")),
    ("Finance", ("Financial Analysis", "Accounting", "Budgeting", "Forecasting")),
    ("Project Management", ("Project Management", "Agile", "Scrum", "Leadership")),
)
DEFAULT_EXPERTISE = "General"

JOB_TITLE_KEYWORDS: Tuple[str, ...] = (
    "Software Engineer", "Senior Developer", "Junior Developer", "Full Stack Developer",
    "Frontend Developer", "Backend Developer", "DevOps Engineer", "Data Scientist",
    "Product Manager", "Project Manager", "Marketing Manager", "Sales Manager",
    "UX Designer", "UI Designer", "Graphic Designer", "Analyst", "Consultant",
    "Director", "Team Lead", "Tech Lead", "CTO", "CEO", "VP", "Manager",
    "Coordinator", "Specialist", "Associate", "Intern", "Trainee",
)

DEGREE_KEYWORDS: Tuple[str, ...] = (
    "Bachelor", "Master", "PhD", "Associate", "Diploma", "Certificate",
    "B.S.", "B.A.", "M.S.", "M.A.", "MBA", "B.Tech", "M.Tech",
)
INSTITUTION_PLACEHOLDER = "University"

NAME_NOT_FOUND = "Name Not Found"
DEFAULT_TITLE = "professional"
