"""Built-in career catalog used when no dataset has been uploaded."""

from __future__ import annotations

from careerfit.dataset.models import CareerRecord

_DEFAULT_CAREERS: list[dict] = [
    {
        "id": "data-scientist",
        "title": "Data Scientist",
        "description": "Builds statistical and machine-learning models to answer business questions from data.",
        "primaryType": "investigative",
        "secondaryType": "conventional",
        "requiredSkills": ["data-analysis", "programming", "statistics", "communication"],
        "workEnvironment": ["office", "remote-friendly", "team-based"],
        "salaryRange": "$95,000 - $165,000",
        "growthOutlook": "Much faster than average",
        "education": "Bachelor's or Master's in a quantitative field",
    },
    {
        "id": "software-engineer",
        "title": "Software Engineer",
        "description": "Designs, builds and maintains software systems and applications.",
        "primaryType": "investigative",
        "secondaryType": "realistic",
        "requiredSkills": ["programming", "problem-solving", "teamwork"],
        "workEnvironment": ["office", "remote-friendly", "team-based"],
        "salaryRange": "$90,000 - $170,000",
        "growthOutlook": "Much faster than average",
        "education": "Bachelor's in Computer Science or equivalent experience",
    },
    {
        "id": "research-scientist",
        "title": "Research Scientist",
        "description": "Plans and runs experiments to extend knowledge in a scientific field.",
        "primaryType": "investigative",
        "requiredSkills": ["research", "data-analysis", "writing"],
        "workEnvironment": ["laboratory", "academic"],
        "salaryRange": "$70,000 - $140,000",
        "growthOutlook": "Faster than average",
        "education": "PhD in a scientific discipline",
    },
    {
        "id": "ux-designer",
        "title": "UX Designer",
        "description": "Researches user needs and designs intuitive digital products.",
        "primaryType": "artistic",
        "secondaryType": "investigative",
        "requiredSkills": ["design", "research", "communication", "empathy"],
        "workEnvironment": ["office", "remote-friendly", "team-based"],
        "salaryRange": "$75,000 - $130,000",
        "growthOutlook": "Faster than average",
        "education": "Bachelor's in Design, HCI or related field",
    },
    {
        "id": "graphic-designer",
        "title": "Graphic Designer",
        "description": "Creates visual concepts that communicate ideas to audiences.",
        "primaryType": "artistic",
        "secondaryType": "enterprising",
        "requiredSkills": ["design", "creativity", "communication"],
        "workEnvironment": ["studio", "freelance"],
        "salaryRange": "$45,000 - $85,000",
        "growthOutlook": "Average",
        "education": "Bachelor's in Graphic Design",
    },
    {
        "id": "content-writer",
        "title": "Content Writer",
        "description": "Writes and edits articles, documentation and marketing copy.",
        "primaryType": "artistic",
        "secondaryType": "social",
        "requiredSkills": ["writing", "creativity", "research"],
        "workEnvironment": ["remote-friendly", "freelance"],
        "salaryRange": "$45,000 - $80,000",
        "growthOutlook": "Average",
        "education": "Bachelor's in English, Journalism or Communications",
    },
    {
        "id": "school-counselor",
        "title": "School Counselor",
        "description": "Supports students' academic, career and social-emotional development.",
        "primaryType": "social",
        "secondaryType": "artistic",
        "requiredSkills": ["empathy", "communication", "active-listening"],
        "workEnvironment": ["school", "one-on-one"],
        "salaryRange": "$50,000 - $80,000",
        "growthOutlook": "Faster than average",
        "education": "Master's in School Counseling",
    },
    {
        "id": "registered-nurse",
        "title": "Registered Nurse",
        "description": "Provides and coordinates patient care in clinical settings.",
        "primaryType": "social",
        "secondaryType": "investigative",
        "requiredSkills": ["empathy", "attention-to-detail", "teamwork", "stress-management"],
        "workEnvironment": ["hospital", "shift-work", "team-based"],
        "salaryRange": "$65,000 - $110,000",
        "growthOutlook": "Faster than average",
        "education": "Associate's or Bachelor's in Nursing",
    },
    {
        "id": "teacher",
        "title": "Teacher",
        "description": "Plans lessons and helps learners develop knowledge and skills.",
        "primaryType": "social",
        "secondaryType": "artistic",
        "requiredSkills": ["communication", "leadership", "organization"],
        "workEnvironment": ["school", "team-based"],
        "salaryRange": "$45,000 - $75,000",
        "growthOutlook": "Average",
        "education": "Bachelor's in Education plus certification",
    },
    {
        "id": "product-manager",
        "title": "Product Manager",
        "description": "Sets product direction and coordinates teams to deliver it.",
        "primaryType": "enterprising",
        "secondaryType": "investigative",
        "requiredSkills": ["leadership", "communication", "data-analysis", "problem-solving"],
        "workEnvironment": ["office", "team-based", "fast-paced"],
        "salaryRange": "$100,000 - $180,000",
        "growthOutlook": "Faster than average",
        "education": "Bachelor's degree; MBA helpful",
    },
    {
        "id": "sales-manager",
        "title": "Sales Manager",
        "description": "Leads a sales team, sets targets and builds client relationships.",
        "primaryType": "enterprising",
        "secondaryType": "social",
        "requiredSkills": ["negotiation", "leadership", "communication"],
        "workEnvironment": ["office", "travel", "fast-paced"],
        "salaryRange": "$80,000 - $160,000",
        "growthOutlook": "Average",
        "education": "Bachelor's in Business or Marketing",
    },
    {
        "id": "entrepreneur",
        "title": "Entrepreneur",
        "description": "Starts and grows a business, taking on financial risk.",
        "primaryType": "enterprising",
        "secondaryType": "artistic",
        "requiredSkills": ["leadership", "negotiation", "creativity", "problem-solving"],
        "workEnvironment": ["self-employed", "fast-paced"],
        "salaryRange": "Highly variable",
        "growthOutlook": "Variable",
        "education": "No formal requirement",
    },
    {
        "id": "accountant",
        "title": "Accountant",
        "description": "Prepares and examines financial records for accuracy and compliance.",
        "primaryType": "conventional",
        "secondaryType": "enterprising",
        "requiredSkills": ["attention-to-detail", "mathematics", "organization"],
        "workEnvironment": ["office", "structured"],
        "salaryRange": "$55,000 - $95,000",
        "growthOutlook": "Average",
        "education": "Bachelor's in Accounting; CPA for advancement",
    },
    {
        "id": "data-analyst",
        "title": "Data Analyst",
        "description": "Cleans, analyses and reports on data to support decisions.",
        "primaryType": "conventional",
        "secondaryType": "investigative",
        "requiredSkills": ["data-analysis", "attention-to-detail", "statistics"],
        "workEnvironment": ["office", "remote-friendly", "structured"],
        "salaryRange": "$60,000 - $100,000",
        "growthOutlook": "Faster than average",
        "education": "Bachelor's in a quantitative field",
    },
    {
        "id": "electrician",
        "title": "Electrician",
        "description": "Installs, maintains and repairs electrical systems.",
        "primaryType": "realistic",
        "secondaryType": "conventional",
        "requiredSkills": ["mechanical-aptitude", "problem-solving", "safety-awareness"],
        "workEnvironment": ["outdoors", "hands-on", "travel"],
        "salaryRange": "$50,000 - $95,000",
        "growthOutlook": "Faster than average",
        "education": "Apprenticeship and state license",
    },
    {
        "id": "civil-engineer",
        "title": "Civil Engineer",
        "description": "Designs and supervises infrastructure such as roads, bridges and water systems.",
        "primaryType": "realistic",
        "secondaryType": "investigative",
        "requiredSkills": ["mathematics", "problem-solving", "project-management"],
        "workEnvironment": ["office", "outdoors", "team-based"],
        "salaryRange": "$70,000 - $125,000",
        "growthOutlook": "Average",
        "education": "Bachelor's in Civil Engineering; PE license",
    },
]


def default_careers() -> tuple[CareerRecord, ...]:
    """Return the built-in career records."""
    return tuple(CareerRecord.model_validate(item) for item in _DEFAULT_CAREERS)
