from string import Template

# Rendered in place of any value the caller did not supply
PLACEHOLDER = "[____]"

# ---------------------------------------------------------------------------
# English
# ---------------------------------------------------------------------------

# 1. Order (operative only, no analysis)
ORDER_EN_TEMPLATE = Template("""OFFICE OF THE $office_designation_upper
$office_body_upper

File No.: $case_number     Date: $today
Subject: $subject

REFERENCES:
$references

ORDER:
1) Based on the record and the applicable GR(s):
   • Applicant: $applicant_name
   • Village/Taluka: $village/$taluka
   • Hearing: $hearing_date $hearing_time
   • Governing provision(s): $provisions
2) $residency_directive
3) Implementation: the order shall be issued within 7 (seven) days from the date of this Order.
4) Compliance report: to be submitted within 45 (forty-five) days.
5) Any earlier contrary orders/decisions stand cancelled.
6) Appeal: $appeal_clause

($office_designation)
$office_body""")

# 2. Decision (brief findings allowed)
DECISION_EN_TEMPLATE = Template("""QUASI-JUDICIAL DECISION (Brief)

OFFICE OF THE $office_designation_upper
$office_body_upper

File No.: $case_number | Date: $today
Applicant: $applicant_name
Subject: $subject

REFERENCES:
$references

FACTS (brief):
• Village/Taluka: $village/$taluka
• Hearing: $hearing_date $hearing_time

LEGAL FRAMEWORK:
• $provisions

CONCLUSION:
• $residency_finding

DIRECTIONS:
• Order to be issued within 7 days; compliance report within 45 days.
• Appeal: $appeal_clause

($office_designation)
$office_body""")

ORDER_EN_TASK = Template("""[task]
Draft ONLY the "OFFICIAL ORDER". Do not add any analysis or reasoning.
Reproduce the format below exactly, with its headings. Keep every $placeholder as it is unless the source documents state the value.

$skeleton

Note: the order text must be the final order only.""")

DECISION_EN_TASK = Template("""[task]
Draft a concise "Decision": brief findings and reasoning only.
FACTS, LEGAL FRAMEWORK and CONCLUSION together must stay shorter than the operative section of the corresponding Order (at most two bullets each).
Reproduce the format below, with its headings. Keep every $placeholder as it is unless the source documents state the value.

$skeleton""")

RESIDENCY_DIRECTIVE_EN = {
    True: "As the record shows that the local-residency condition of the GR is attracted, "
          "the concerned authority shall issue the appointment/relief/action to $applicant_name "
          "strictly as per the GR.",
    False: "As the record shows that the local-residency condition of the GR is not attracted, "
           "the concerned authority shall dispose of the matter of $applicant_name strictly as per the GR.",
    None: "Local-residency condition: $placeholder. The concerned authority shall issue the "
          "appointment/relief/action to $applicant_name strictly as per the GR.",
}

RESIDENCY_FINDING_EN = {
    True: "The local-residency condition of the GR is attracted; relief/appointment as per the GR.",
    False: "The local-residency condition of the GR is not attracted.",
    None: "$placeholder",
}

APPEAL_SINGLE_EN = Template(
    "An appeal against this Order lies before $authority within 60 (sixty) days "
    "from the date of this Order."
)
APPEAL_TWO_TIER_EN = Template(
    "A first appeal against this Order lies before $first_authority within 30 (thirty) days "
    "from the date of this Order; a second appeal lies before $second_authority within "
    "60 (sixty) days from the date of the first appellate order."
)

GR_REFERENCE_EN = Template("GR No. $number dated $date$dept$topic")

# ---------------------------------------------------------------------------
# Marathi
# ---------------------------------------------------------------------------

ORDER_MR_TEMPLATE = Template("""आदेश (अर्ध-न्यायिक)

कार्यालय : $office_designation, $office_body
फाईल क्र.: $case_number
दिनांक : $today
विषय : $subject

संदर्भ :
$references

आदेश :
1) नोंदी व शासन निर्णयातील तरतुदींनुसार पुढील आदेश देण्यात येतो:
   • अर्जदार : $applicant_name
   • गाव/तालुका : $village/$taluka
   • सुनावणी : $hearing_date $hearing_time
   • लागू तरतुदी : $provisions
2) $residency_directive
3) अंमलबजावणीचा कालावधी : या आदेशाच्या तारखेपासून ७ (सात) दिवस.
4) अनुपालन अहवाल : आदेश निर्गमित केल्यानंतर ४५ दिवसांच्या आत सादर करावा.
5) विरोधाभासी पूर्वनिर्णय/आदेश असल्यास ते रद्दबातल.
6) अपील तरतूद : $appeal_clause

($office_designation)
$office_body""")

DECISION_MR_TEMPLATE = Template("""अर्ध-न्यायिक निर्णय (संक्षेप)

कार्यालय : $office_designation, $office_body
फाईल क्र.: $case_number | दिनांक: $today
अर्जदार: $applicant_name
विषय: $subject

संदर्भ :
$references

तथ्ये (थोडक्यात) :
• गाव/तालुका : $village/$taluka
• सुनावणी : $hearing_date $hearing_time

कायदेशीर चौकट :
• $provisions

निष्कर्ष :
• $residency_finding

दिशा-निर्देश :
• ७ दिवसांत आदेश, ४५ दिवसांत अनुपालन अहवाल.
• अपील : $appeal_clause

($office_designation)
$office_body""")

ORDER_MR_TASK = Template("""[task]
मराठीत केवळ "आदेश" (अर्ध-न्यायिक) तयार करा; विश्लेषण किंवा तर्क देऊ नका.
खालील स्वरूप शीर्षक/उपशीर्षकांसह जसेच्या तसे पाळा. स्रोत दस्तऐवजात तपशील नसल्यास $placeholder तसेच ठेवा.

$skeleton

सूचना:
• कृपया केवळ वरील स्वरूपातच अंतिम आदेश द्या.""")

DECISION_MR_TASK = Template("""[task]
मराठीत संक्षिप्त "निर्णय" तयार करा: थोडक्यात तथ्ये, कायदेशीर चौकट व निष्कर्ष.
तथ्ये, कायदेशीर चौकट व निष्कर्ष मिळून संबंधित आदेशाच्या आदेश-भागापेक्षा कमी असावेत (प्रत्येकी जास्तीत जास्त दोन मुद्दे).
खालील स्वरूप पाळा. स्रोत दस्तऐवजात तपशील नसल्यास $placeholder तसेच ठेवा.

$skeleton""")

RESIDENCY_DIRECTIVE_MR = {
    True: "प्रकरणात शासन निर्णयातील स्थानिक रहिवासी अट लागू असल्याचे नोंदीवरून स्पष्ट होत असल्याने, "
          "संबंधित अधिकाऱ्यांनी $applicant_name यांना शासन निर्णयानुसार अपेक्षित "
          "दिलासा/नियुक्ती/कारवाई देऊन आदेश निर्गमित करावा.",
    False: "प्रकरणात शासन निर्णयातील स्थानिक रहिवासी अट लागू होत नसल्याचे नोंदीवरून स्पष्ट होत असल्याने, "
           "संबंधित अधिकाऱ्यांनी $applicant_name यांच्या प्रकरणी शासन निर्णयानुसार कार्यवाही करावी.",
    None: "स्थानिक रहिवासी अट : $placeholder. संबंधित अधिकाऱ्यांनी $applicant_name यांना "
          "शासन निर्णयानुसार अपेक्षित दिलासा/नियुक्ती/कारवाई देऊन आदेश निर्गमित करावा.",
}

RESIDENCY_FINDING_MR = {
    True: "शासन निर्णयातील स्थानिक रहिवासी अट लागू; दिलासा/नियुक्ती शासन निर्णयानुसार.",
    False: "शासन निर्णयातील स्थानिक रहिवासी अट लागू नाही.",
    None: "$placeholder",
}

APPEAL_SINGLE_MR = Template(
    "या आदेशाविरुद्ध $authority यांच्याकडे ६० दिवसांच्या आत अपील करता येईल."
)
APPEAL_TWO_TIER_MR = Template(
    "या आदेशाविरुद्ध प्रथम अपील $first_authority यांच्याकडे ३० दिवसांच्या आत, "
    "व त्यानंतर द्वितीय अपील $second_authority यांच्याकडे ६० दिवसांच्या आत करता येईल."
)

GR_REFERENCE_MR = Template("शासन निर्णय क्र. $number, दिनांक $date$dept$topic")

# ---------------------------------------------------------------------------
# Analyze (facts only, any language)
# ---------------------------------------------------------------------------

ANALYZE_TASK = Template("""[task]
Extract the structured facts of this case from the source documents and the officer's fields.
Do NOT draft a Decision or an Order.
Use only what the documents state; leave a field empty ("", [] or null) when they are silent.

Facts to extract:
- village, taluka
- hearingDate (dd/mm/yyyy), hearingTime
- subject (one line)
- references (letters, applications, hearing notices; in order)
- grs (every Government Resolution cited: dept, number, date, topic)
- localResidencyFlag (true only if a GR imposes a local-residency condition relevant to this case; otherwise false, or null if unclear)

Write the values in $language_name.""")
