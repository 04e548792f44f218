DEFAULT = {
    'request-timeout': 30000,  # ms
    'grpc-wait-for-ready-timeout': 3000,  # ms
    'grpc.max_send_message_length': -1,
    'grpc.max_receive_message_length': -1,
}
