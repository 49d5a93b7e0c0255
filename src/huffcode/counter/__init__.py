from .frequency import FrequencyCounter, FrequencyMap, aggregate_frequencies, count_characters
