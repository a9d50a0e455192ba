"""Stories Bounded Context.

Customer-story submissions (validation and echo only):
- Value Objects: CustomerStory, StoryAttachment, CustomerStoryResponse
- Handler: handle_create_customer_story
"""
