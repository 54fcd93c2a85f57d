from string import Template

fallback_response = Template("<p>Unable to generate response. Please try again.</p>")

service_unavailable_response = Template(
    "Failed to connect to the educational database. Please check your connection."
)

validation_error_response = Template(
    "Please provide at least the symptom and its duration."
)

unexpected_error_response = Template(
    "An unexpected error occurred."
)
