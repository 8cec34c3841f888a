"""
Questionnaire answers shared across the calculator tests.

STRONG_PROFILE is the "ideal applicant" (30-year-old master's graduate in
Computer Science moving to Canada, IELTS 8.0, job offer, 50k+ savings);
WEAK_PROFILE is the opposite end (50-year-old, high school, no English test,
no job offer, under 5k).
"""

STRONG_PROFILE = {
    "currentCountry": "India",
    "citizenship": "Indian",
    "targetCountry": "Canada",
    "age": 30,
    "maritalStatus": "single",
    "hasDependents": False,
    "educationLevel": "master",
    "fieldOfStudy": "Computer Science",
    "yearsOfExperience": 6,
    "workDomain": "Software",
    "employmentStatus": "employed",
    "annualIncome": "50k-100k",
    "englishTest": "ielts",
    "englishScore": 8.0,
    "visaType": "skilled",
    "previousVisaApplications": False,
    "hasJobOffer": "yes",
    "financialResources": "50k+",
    "timeline": "flexible",
    "hasFamilyInTarget": False,
}

WEAK_PROFILE = {
    "currentCountry": "Vietnam",
    "citizenship": "Vietnamese",
    "targetCountry": "Vietnam",
    "age": 50,
    "maritalStatus": "married",
    "hasDependents": True,
    "dependentsCount": 3,
    "educationLevel": "highSchool",
    "fieldOfStudy": "",
    "yearsOfExperience": 0,
    "workDomain": "Retail",
    "employmentStatus": "unemployed",
    "annualIncome": "<10k",
    "englishTest": "none",
    "visaType": "work",
    "previousVisaApplications": False,
    "hasJobOffer": "no",
    "financialResources": "<5k",
    "timeline": "immediate",
    "hasFamilyInTarget": False,
}
