HARVEST_TIME_PROMPT = """
You are an agricultural expert. Based on the provided crop type and planting date, predict the estimated harvest date.

Today's date is {today}.

Crop Type: {crop_type}
Planting Date: {planting_date}

Calculate the estimated harvest date and the number of days from today until harvest. Provide a specific date for the harvest.
"""
