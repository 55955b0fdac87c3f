from cv_customizer.ai.types import ChatMessage

DELIMITER = '"""'

RESUME_SYSTEM_PROMPT = (
    "You are an expert resume writer and career coach. "
    "Your task is to take the provided 'Original Resume' and the 'Job Description' and generate "
    "a complete, ready-to-use 'Tailored Resume'.\n"
    "The 'Tailored Resume' should:\n"
    "1. Be a full resume document, not a summary of changes or a list of suggestions.\n"
    "2. Keep every relevant section of the 'Original Resume' (Contact Info, Summary, Skills, "
    "Experience, Education, Portfolio, Certifications, Additional Information).\n"
    "3. Rewrite and rephrase the original content so it aligns with the keywords, requirements "
    "and responsibilities of the 'Job Description'.\n"
    "4. Emphasize the skills and experience most relevant to the target job.\n"
    "5. Keep a professional tone and use strong action verbs.\n"
    "6. Be well formatted and easy to read. Use placeholders such as [Your Name], [Your Email], "
    "[Company Name] or [University Name] for details that are missing or must be filled in by the user.\n"
    "7. Never invent experience or skills that are not in the original resume; re-angle and "
    "emphasize what is already there.\n"
    "8. Start with a clear, professional **Header / Contact Information** section:\n"
    "   a. The applicant's full name is the most prominent element and is written in **bold**.\n"
    "   b. A contact block follows the name: Phone Number, Email Address, LinkedIn Profile URL, "
    "GitHub Profile URL (for technical roles) and a Portfolio/Website URL when available.\n"
    "   c. Contact details are easy to scan, one per line or grouped (Phone | Email | LinkedIn).\n"
    "   d. Missing contact details use placeholders such as [Your Phone Number], "
    "[Your LinkedIn Profile URL] or [Your Portfolio URL].\n"
    "   e. Separate the header from the following sections with a line containing only ---.\n"
    "Mark section headings in **bold** and separate major sections with a line containing only ---."
)

COVER_LETTER_SYSTEM_PROMPT = (
    "You are an expert career advisor specializing in compelling cover letters. "
    "Write a personalized cover letter based on the provided resume and job description. "
    "The letter should express genuine interest in the role and the company, highlight the "
    "qualifications from the resume that match the job description, and close with a strong "
    "call to action. Address it generically if no hiring manager is named. "
    "Return a complete cover letter."
)


def _quote(text: str) -> str:
    return f"{DELIMITER}\n{text}\n{DELIMITER}"


def build_resume_messages(current_resume: str, job_description: str) -> list[ChatMessage]:
    user = (
        f"Original Resume:\n{_quote(current_resume)}\n\n"
        f"Job Description:\n{_quote(job_description)}\n\n"
        "Generate the Tailored Resume based on the above, paying close attention to crafting "
        "an excellent header section:"
    )
    return [
        ChatMessage(role="system", content=RESUME_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user),
    ]


def build_cover_letter_messages(current_resume: str, job_description: str) -> list[ChatMessage]:
    user = (
        f"Applicant's Resume:\n{_quote(current_resume)}\n\n"
        f"Job Description:\n{_quote(job_description)}\n\n"
        "Cover Letter:"
    )
    return [
        ChatMessage(role="system", content=COVER_LETTER_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user),
    ]
