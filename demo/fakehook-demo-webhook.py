from fakehook.generators import generate_people
from fakehook.webhooks import webhook_service_factory, WebhookError

PEOPLE_COUNT: int = 3

################
# ## Generate ###
################

print("\n\n##### Generate #######\n\n")

people = generate_people(PEOPLE_COUNT, locale='en_US', seed=1234)
for person in people:
    person.validate()
    print(person.as_dict())

################
# #### Send #####
################

print("\n\n##### Send #######\n\n")

service = webhook_service_factory.get(WEBHOOK_PROVIDER='webhook_site')
service.create_token()
print(f"Capture URL: {service.url}")

try:
    response = service.send_models(people)
    print(f"HTTP {response.status_code}")
except WebhookError as e:
    print(f"Sending failed: {e}")

################
# ## Inspect ####
################

print("\n\n##### Inspect #######\n\n")

latest = service.get_latest_request()
if latest:
    print(latest.get('method'), latest.get('content'))

service.delete_token()
